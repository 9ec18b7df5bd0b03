# -*- coding: utf-8 -*-
"""English translations."""

EN_TRANSLATIONS = {
    # Dialogs
    "dialog.error": "Error",
    "dialog.warning": "Warning",
    "dialog.confirm": "Confirm",

    # Buttons
    "button.cancel": "Cancel",
    "button.save": "Save",
    "button.back": "Back",
    "button.next": "Next",
    "button.submit": "Submit",
    "button.submitting": "Saving...",

    # Main window
    "main.add_contract": "Add Contract",
    "main.add_vehicle": "Add Vehicle",

    # Wizard shell
    "wizard.title": "Wizard",
    "wizard.progress": "Step {current} of {total} ({completed} completed)",
    "wizard.discard_changes": "You have unsaved changes. Discard them and close?",

    # Generic fields
    "field.select": "-- Select --",
    "field.loading": "Loading...",
    "field.search": "Type to search...",

    # Errors - API
    "error.api.connection": "Could not reach the server. Please check your connection.",
    "error.api.timeout": "The server took too long to respond. Please try again.",
    "error.api.not_found": "The requested record was not found.",
    "error.api.server": "The server encountered an error. Please try again later.",
    "error.unexpected": "An unexpected error occurred.",
    "error.validation.failed": "Some fields are invalid. Please review the form.",

    # Errors - Submission
    "error.submission.failed": "Saving failed. Please try again.",
    "error.submission.no_branch": "No branch is selected for this record.",
    "error.submission.no_entity": "The record being edited has no id.",
    "error.submission.contract_failed": "Failed to save the contract.",
    "error.submission.contract_no_branch": "Select a branch before saving the contract.",
    "error.submission.vehicle_failed": "Failed to save the vehicle.",
    "error.submission.vehicle_no_branch": "Select a branch before saving the vehicle.",

    # Validation - generic
    "validation.required": "This field is required.",
    "validation.invalid": "Invalid value.",
    "validation.number": "Enter a valid number.",
    "validation.integer": "Enter a whole number.",
    "validation.greater_than": "Must be greater than {min}.",
    "validation.min": "Must be at least {min}.",
    "validation.max": "Must be at most {max}.",
    "validation.min_field": "Must be at least {min}.",
    "validation.one_of": "Choose one of: {choices}.",
    "validation.date": "Enter a valid date.",
    "validation.date_in_past": "The date cannot be in the past.",
    "validation.date_after": "Must be after the start date.",
    "validation.date_not_before": "Cannot be before the related date.",
    "validation.check_data": "Please correct {count} field(s) before continuing.",

    # Validation - contract
    "validation.contract.customer_required": "Select a customer.",
    "validation.contract.vehicle_required": "Select a vehicle.",
    "validation.contract.plate_required": "The selected vehicle has no plate number.",
    "validation.contract.serial_required": "The selected vehicle has no serial number.",
    "validation.contract.start_required": "Start date is required.",
    "validation.contract.start_in_past": "Start date cannot be in the past.",
    "validation.contract.end_required": "End date is required.",
    "validation.contract.end_after_start": "End date must be after the start date.",
    "validation.contract.duration_required": "Enter the duration in days.",
    "validation.contract.duration_min": "Duration must be at least 1 day.",
    "validation.contract.fees_required": "Enter the total fees.",
    "validation.contract.fees_below_rate": "Total fees must cover at least one day.",
    "validation.contract.rental_days": "Rental days must be a whole number of at least 1.",
    "validation.contract.deposit_required": "Deposit amount is required.",
    "validation.contract.deposit_number": "Deposit must be a positive amount.",
    "validation.contract.deposit_mismatch": "Deposit must equal the total amount ({total}).",
    "validation.contract.inspector_required": "Select an inspector.",

    # Validation - vehicle
    "validation.vehicle.make_required": "Select a make.",
    "validation.vehicle.model_required": "Select a model.",
    "validation.vehicle.branch_required": "Select a branch.",
    "validation.vehicle.car_pricing": "Car price must be greater than zero.",
    "validation.vehicle.depreciation_rate": "Depreciation rate must be between 0 and 100.",
    "validation.vehicle.operation_before_acquisition": "Operation date cannot be before the acquisition date.",
    "validation.vehicle.owner_required": "Select an owner.",
    "validation.vehicle.actual_user_required": "Select the actual user.",
    "validation.vehicle.policy_required": "Select an insurance policy.",

    # Contract wizard
    "contract.wizard.title": "New Rental Contract",
    "contract.wizard.edit_title": "Edit Rental Contract",
    "contract.wizard.submit": "Create Contract",
    "contract.step.customer_details": "Customer",
    "contract.step.vehicle_details": "Vehicle",
    "contract.step.contract_details": "Contract",
    "contract.step.pricing_terms": "Pricing",
    "contract.step.vehicle_inspection": "Inspection",
    "contract.step.summary": "Summary",
    "contract.customer.blacklisted": "{name} is blacklisted and cannot rent a vehicle.",
    "contract.duration_type.duration": "By duration",
    "contract.duration_type.fees": "By total fees",
    "contract.section.add_ons": "Add-ons",
    "contract.section.payment": "Payment",
    "contract.summary.customer": "Customer",
    "contract.summary.vehicle": "Vehicle",
    "contract.summary.term": "Rental term",
    "contract.summary.payment": "Payment",
    "contract.summary.inspection": "Inspection",
    "contract.summary.pricing": "Pricing",
    "contract.summary.base": "{days} day(s) x {rate}",
    "contract.summary.discount": "Membership discount",

    # Payment methods and add-ons
    "payment.cash": "Cash",
    "payment.card": "Card",
    "addon.car_delivery": "Car delivery",
    "addon.child_seat": "Child seat",
    "addon.internet": "Internet",
    "addon.gps": "GPS",
    "addon.special_aid": "Special aid",

    # Contract fields
    "field.customer": "Customer",
    "field.customer_name": "Customer name",
    "field.customer_id_number": "ID number",
    "field.customer_id_type": "ID type",
    "field.customer_mobile": "Mobile",
    "field.customer_nationality": "Nationality",
    "field.customer_date_of_birth": "Date of birth",
    "field.customer_address": "Address",
    "field.customer_license_type": "License type",
    "field.customer_classification": "Classification",
    "field.customer_status": "Status",
    "field.vehicle": "Vehicle",
    "field.vehicle_plate": "Plate number",
    "field.vehicle_serial_number": "Serial number",
    "field.vehicle_make": "Make",
    "field.vehicle_model": "Model",
    "field.vehicle_status": "Vehicle status",
    "field.hourly_delay_rate": "Hourly delay rate",
    "field.permitted_daily_km": "Permitted daily km",
    "field.excess_km_rate": "Excess km rate",
    "field.contract_number": "Contract number",
    "field.start_date": "Start date",
    "field.end_date": "End date",
    "field.duration_type": "Duration type",
    "field.duration_in_days": "Duration (days)",
    "field.total_fees": "Total fees",
    "field.rental_days": "Rental days",
    "field.current_km": "Current km",
    "field.payment_method": "Payment method",
    "field.membership": "Membership",
    "field.total_amount": "Total amount",
    "field.deposit_amount": "Deposit amount",
    "field.inspector": "Inspector",
    "field.inspector_name": "Inspector name",

    # Vehicle wizard
    "vehicle.wizard.title": "New Vehicle",
    "vehicle.wizard.edit_title": "Edit Vehicle",
    "vehicle.wizard.submit": "Add Vehicle",
    "vehicle.step.vehicle_details": "Vehicle details",
    "vehicle.step.pricing_fee": "Pricing and fees",
    "vehicle.step.expiration_dates": "Expiration dates",
    "vehicle.step.vehicle_pricing": "Vehicle pricing",
    "vehicle.step.additional_details": "Additional details",
    "vehicle.section.daily": "Daily",
    "vehicle.section.monthly": "Monthly",
    "vehicle.section.hourly": "Hourly",
    "vehicle.section.insurance": "Insurance",

    # Vehicle fields
    "field.make": "Make",
    "field.model": "Model",
    "field.make_year": "Make year",
    "field.color": "Color",
    "field.age_range": "Age range",
    "field.serial_number": "Serial number",
    "field.plate_number": "Plate number",
    "field.mileage": "Mileage",
    "field.year_of_manufacture": "Year of manufacture",
    "field.car_class": "Car class",
    "field.plate_registration_type": "Plate registration type",
    "field.expected_sale_price": "Expected sale price",
    "field.branch": "Branch",
    "field.chassis_number": "Chassis number",
    "field.vehicle_load_capacity": "Load capacity",
    "field.technical_number": "Technical number",
    "field.daily_rental_rate": "Daily rental rate",
    "field.daily_minimum_rate": "Minimum rate",
    "field.daily_hourly_delay_rate": "Hourly delay rate",
    "field.daily_permitted_km": "Permitted km",
    "field.daily_excess_km_rate": "Excess km rate",
    "field.daily_open_km_rate": "Open km rate",
    "field.monthly_rental_rate": "Monthly rental rate",
    "field.monthly_minimum_rate": "Minimum rate",
    "field.monthly_hourly_delay_rate": "Hourly delay rate",
    "field.monthly_permitted_km": "Permitted km",
    "field.monthly_excess_km_rate": "Excess km rate",
    "field.monthly_open_km_rate": "Open km rate",
    "field.hourly_rental_rate": "Hourly rental rate",
    "field.hourly_permitted_km": "Permitted km",
    "field.hourly_excess_km_rate": "Excess km rate",
    "field.form_license_expiration": "Form license expiration",
    "field.insurance_policy_expiration": "Insurance policy expiration",
    "field.periodic_inspection_end": "Periodic inspection end",
    "field.operating_card_expiration": "Operating card expiration",
    "field.car_pricing": "Car price",
    "field.acquisition_date": "Acquisition date",
    "field.operation_date": "Operation date",
    "field.depreciation_rate": "Depreciation rate (%)",
    "field.depreciation_years": "Depreciation years",
    "field.car_status": "Car status",
    "field.owner": "Owner",
    "field.owner_code": "Owner code",
    "field.actual_user": "Actual user",
    "field.user_code": "User code",
    "field.insurance_company": "Insurance company",
    "field.insurance_policy": "Insurance policy",
    "field.policy_number": "Policy number",
    "field.insurance_value": "Insurance value",
    "field.deductible_premium": "Deductible premium",
}
