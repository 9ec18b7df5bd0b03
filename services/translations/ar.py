# -*- coding: utf-8 -*-
"""Arabic translations."""

AR_TRANSLATIONS = {
    # Dialogs
    "dialog.error": "خطأ",
    "dialog.warning": "تحذير",
    "dialog.confirm": "تأكيد",

    # Buttons
    "button.cancel": "إلغاء",
    "button.save": "حفظ",
    "button.back": "السابق",
    "button.next": "التالي",
    "button.submit": "إرسال",
    "button.submitting": "جارٍ الحفظ...",

    # Main window
    "main.add_contract": "إضافة عقد",
    "main.add_vehicle": "إضافة مركبة",

    # Wizard shell
    "wizard.title": "معالج",
    "wizard.progress": "الخطوة {current} من {total} ({completed} مكتملة)",
    "wizard.discard_changes": "لديك تغييرات غير محفوظة. هل تريد تجاهلها والإغلاق؟",

    # Generic fields
    "field.select": "-- اختر --",
    "field.loading": "جارٍ التحميل...",
    "field.search": "اكتب للبحث...",

    # Errors - API
    "error.api.connection": "تعذر الاتصال بالخادم. يرجى التحقق من الاتصال.",
    "error.api.timeout": "انتهت مهلة استجابة الخادم. يرجى المحاولة مرة أخرى.",
    "error.api.not_found": "السجل المطلوب غير موجود.",
    "error.api.server": "حدث خطأ في الخادم. يرجى المحاولة لاحقاً.",
    "error.unexpected": "حدث خطأ غير متوقع.",
    "error.validation.failed": "بعض الحقول غير صالحة. يرجى مراجعة النموذج.",

    # Errors - Submission
    "error.submission.failed": "فشل الحفظ. يرجى المحاولة مرة أخرى.",
    "error.submission.no_branch": "لم يتم تحديد فرع لهذا السجل.",
    "error.submission.no_entity": "السجل الجاري تعديله بلا معرف.",
    "error.submission.contract_failed": "فشل حفظ العقد.",
    "error.submission.contract_no_branch": "اختر فرعاً قبل حفظ العقد.",
    "error.submission.vehicle_failed": "فشل حفظ المركبة.",
    "error.submission.vehicle_no_branch": "اختر فرعاً قبل حفظ المركبة.",

    # Validation - generic
    "validation.required": "هذا الحقل مطلوب.",
    "validation.invalid": "قيمة غير صالحة.",
    "validation.number": "أدخل رقماً صحيحاً.",
    "validation.integer": "أدخل عدداً صحيحاً.",
    "validation.greater_than": "يجب أن تكون القيمة أكبر من {min}.",
    "validation.min": "يجب ألا تقل القيمة عن {min}.",
    "validation.max": "يجب ألا تزيد القيمة عن {max}.",
    "validation.min_field": "يجب ألا تقل القيمة عن {min}.",
    "validation.one_of": "اختر أحد الخيارات: {choices}.",
    "validation.date": "أدخل تاريخاً صالحاً.",
    "validation.date_in_past": "لا يمكن أن يكون التاريخ في الماضي.",
    "validation.date_after": "يجب أن يكون بعد تاريخ البداية.",
    "validation.date_not_before": "لا يمكن أن يسبق التاريخ المرتبط.",
    "validation.check_data": "يرجى تصحيح {count} حقل قبل المتابعة.",

    # Validation - contract
    "validation.contract.customer_required": "اختر عميلاً.",
    "validation.contract.vehicle_required": "اختر مركبة.",
    "validation.contract.plate_required": "المركبة المختارة بلا رقم لوحة.",
    "validation.contract.serial_required": "المركبة المختارة بلا رقم تسلسلي.",
    "validation.contract.start_required": "تاريخ البداية مطلوب.",
    "validation.contract.start_in_past": "لا يمكن أن يكون تاريخ البداية في الماضي.",
    "validation.contract.end_required": "تاريخ النهاية مطلوب.",
    "validation.contract.end_after_start": "يجب أن يكون تاريخ النهاية بعد تاريخ البداية.",
    "validation.contract.duration_required": "أدخل المدة بالأيام.",
    "validation.contract.duration_min": "يجب ألا تقل المدة عن يوم واحد.",
    "validation.contract.fees_required": "أدخل إجمالي الرسوم.",
    "validation.contract.fees_below_rate": "يجب أن يغطي إجمالي الرسوم يوماً واحداً على الأقل.",
    "validation.contract.rental_days": "يجب أن تكون أيام الإيجار عدداً صحيحاً لا يقل عن 1.",
    "validation.contract.deposit_required": "مبلغ التأمين مطلوب.",
    "validation.contract.deposit_number": "يجب أن يكون مبلغ التأمين موجباً.",
    "validation.contract.deposit_mismatch": "يجب أن يساوي مبلغ التأمين المبلغ الإجمالي ({total}).",
    "validation.contract.inspector_required": "اختر مفتشاً.",

    # Validation - vehicle
    "validation.vehicle.make_required": "اختر الشركة المصنعة.",
    "validation.vehicle.model_required": "اختر الطراز.",
    "validation.vehicle.branch_required": "اختر الفرع.",
    "validation.vehicle.car_pricing": "يجب أن يكون سعر المركبة أكبر من صفر.",
    "validation.vehicle.depreciation_rate": "يجب أن تكون نسبة الإهلاك بين 0 و 100.",
    "validation.vehicle.operation_before_acquisition": "لا يمكن أن يسبق تاريخ التشغيل تاريخ الاقتناء.",
    "validation.vehicle.owner_required": "اختر المالك.",
    "validation.vehicle.actual_user_required": "اختر المستخدم الفعلي.",
    "validation.vehicle.policy_required": "اختر وثيقة التأمين.",

    # Contract wizard
    "contract.wizard.title": "عقد إيجار جديد",
    "contract.wizard.edit_title": "تعديل عقد الإيجار",
    "contract.wizard.submit": "إنشاء العقد",
    "contract.step.customer_details": "العميل",
    "contract.step.vehicle_details": "المركبة",
    "contract.step.contract_details": "العقد",
    "contract.step.pricing_terms": "التسعير",
    "contract.step.vehicle_inspection": "الفحص",
    "contract.step.summary": "الملخص",
    "contract.customer.blacklisted": "{name} في القائمة السوداء ولا يمكنه استئجار مركبة.",
    "contract.duration_type.duration": "حسب المدة",
    "contract.duration_type.fees": "حسب إجمالي الرسوم",
    "contract.section.add_ons": "الإضافات",
    "contract.section.payment": "الدفع",
    "contract.summary.customer": "العميل",
    "contract.summary.vehicle": "المركبة",
    "contract.summary.term": "مدة الإيجار",
    "contract.summary.payment": "الدفع",
    "contract.summary.inspection": "الفحص",
    "contract.summary.pricing": "التسعير",
    "contract.summary.base": "{days} يوم × {rate}",
    "contract.summary.discount": "خصم العضوية",

    # Payment methods and add-ons
    "payment.cash": "نقداً",
    "payment.card": "بطاقة",
    "addon.car_delivery": "توصيل المركبة",
    "addon.child_seat": "مقعد أطفال",
    "addon.internet": "إنترنت",
    "addon.gps": "نظام تحديد المواقع",
    "addon.special_aid": "مساعدة خاصة",

    # Contract fields
    "field.customer": "العميل",
    "field.customer_name": "اسم العميل",
    "field.customer_id_number": "رقم الهوية",
    "field.customer_id_type": "نوع الهوية",
    "field.customer_mobile": "الجوال",
    "field.customer_nationality": "الجنسية",
    "field.customer_date_of_birth": "تاريخ الميلاد",
    "field.customer_address": "العنوان",
    "field.customer_license_type": "نوع الرخصة",
    "field.customer_classification": "التصنيف",
    "field.customer_status": "الحالة",
    "field.vehicle": "المركبة",
    "field.vehicle_plate": "رقم اللوحة",
    "field.vehicle_serial_number": "الرقم التسلسلي",
    "field.vehicle_make": "الشركة المصنعة",
    "field.vehicle_model": "الطراز",
    "field.vehicle_status": "حالة المركبة",
    "field.hourly_delay_rate": "أجرة التأخير بالساعة",
    "field.permitted_daily_km": "الكيلومترات اليومية المسموحة",
    "field.excess_km_rate": "أجرة الكيلومتر الزائد",
    "field.contract_number": "رقم العقد",
    "field.start_date": "تاريخ البداية",
    "field.end_date": "تاريخ النهاية",
    "field.duration_type": "نوع المدة",
    "field.duration_in_days": "المدة (أيام)",
    "field.total_fees": "إجمالي الرسوم",
    "field.rental_days": "أيام الإيجار",
    "field.current_km": "العداد الحالي",
    "field.payment_method": "طريقة الدفع",
    "field.membership": "العضوية",
    "field.total_amount": "المبلغ الإجمالي",
    "field.deposit_amount": "مبلغ التأمين",
    "field.inspector": "المفتش",
    "field.inspector_name": "اسم المفتش",

    # Vehicle wizard
    "vehicle.wizard.title": "مركبة جديدة",
    "vehicle.wizard.edit_title": "تعديل المركبة",
    "vehicle.wizard.submit": "إضافة المركبة",
    "vehicle.step.vehicle_details": "بيانات المركبة",
    "vehicle.step.pricing_fee": "الأسعار والرسوم",
    "vehicle.step.expiration_dates": "تواريخ الانتهاء",
    "vehicle.step.vehicle_pricing": "تسعير المركبة",
    "vehicle.step.additional_details": "بيانات إضافية",
    "vehicle.section.daily": "يومي",
    "vehicle.section.monthly": "شهري",
    "vehicle.section.hourly": "بالساعة",
    "vehicle.section.insurance": "التأمين",

    # Vehicle fields
    "field.make": "الشركة المصنعة",
    "field.model": "الطراز",
    "field.make_year": "سنة الصنع",
    "field.color": "اللون",
    "field.age_range": "الفئة العمرية",
    "field.serial_number": "الرقم التسلسلي",
    "field.plate_number": "رقم اللوحة",
    "field.mileage": "عدد الكيلومترات",
    "field.year_of_manufacture": "سنة التصنيع",
    "field.car_class": "فئة المركبة",
    "field.plate_registration_type": "نوع تسجيل اللوحة",
    "field.expected_sale_price": "سعر البيع المتوقع",
    "field.branch": "الفرع",
    "field.chassis_number": "رقم الهيكل",
    "field.vehicle_load_capacity": "الحمولة",
    "field.technical_number": "الرقم الفني",
    "field.daily_rental_rate": "الأجرة اليومية",
    "field.daily_minimum_rate": "الحد الأدنى للأجرة",
    "field.daily_hourly_delay_rate": "أجرة التأخير بالساعة",
    "field.daily_permitted_km": "الكيلومترات المسموحة",
    "field.daily_excess_km_rate": "أجرة الكيلومتر الزائد",
    "field.daily_open_km_rate": "أجرة الكيلومتر المفتوح",
    "field.monthly_rental_rate": "الأجرة الشهرية",
    "field.monthly_minimum_rate": "الحد الأدنى للأجرة",
    "field.monthly_hourly_delay_rate": "أجرة التأخير بالساعة",
    "field.monthly_permitted_km": "الكيلومترات المسموحة",
    "field.monthly_excess_km_rate": "أجرة الكيلومتر الزائد",
    "field.monthly_open_km_rate": "أجرة الكيلومتر المفتوح",
    "field.hourly_rental_rate": "الأجرة بالساعة",
    "field.hourly_permitted_km": "الكيلومترات المسموحة",
    "field.hourly_excess_km_rate": "أجرة الكيلومتر الزائد",
    "field.form_license_expiration": "انتهاء رخصة الاستمارة",
    "field.insurance_policy_expiration": "انتهاء وثيقة التأمين",
    "field.periodic_inspection_end": "انتهاء الفحص الدوري",
    "field.operating_card_expiration": "انتهاء بطاقة التشغيل",
    "field.car_pricing": "سعر المركبة",
    "field.acquisition_date": "تاريخ الاقتناء",
    "field.operation_date": "تاريخ التشغيل",
    "field.depreciation_rate": "نسبة الإهلاك (%)",
    "field.depreciation_years": "سنوات الإهلاك",
    "field.car_status": "حالة المركبة",
    "field.owner": "المالك",
    "field.owner_code": "رمز المالك",
    "field.actual_user": "المستخدم الفعلي",
    "field.user_code": "رمز المستخدم",
    "field.insurance_company": "شركة التأمين",
    "field.insurance_policy": "وثيقة التأمين",
    "field.policy_number": "رقم الوثيقة",
    "field.insurance_value": "قيمة التأمين",
    "field.deductible_premium": "قسط التحمل",
}
