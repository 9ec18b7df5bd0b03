# -*- coding: utf-8 -*-
"""
Contract field rules: entity pickers, contract schedule and pricing total.
"""

from typing import Any, Dict, Optional

from app.config import Config
from models import Customer, Vehicle
from services.entity_service import EntityLookupService
from services.translation_manager import tr
from services.wizard.contract.validators import CUSTOMER_FIELDS
from services.wizard.fetch_dispatcher import FetchDispatcher
from services.wizard.field_resolver import (
    Derivation, FieldResolver, OptionSource, SearchSource, SelectionExpansion,
)
from services.wizard.pricing import (
    DURATION, FEES, add_on_fields, amount_text, compute_total, end_date_for, rental_days_for,
)

# Option sources
CUSTOMERS = "customers"
VEHICLES = "vehicles"
INSPECTORS = "inspectors"


# ============================================================================
# Selection expansions
# ============================================================================

def _customer_cluster(customer: Customer) -> Dict[str, Any]:
    return {
        "customerName": customer.name,
        "customerIdType": customer.id_type,
        "customerIdNumber": customer.id_number,
        "customerClassification": customer.classification,
        "customerAddress": customer.address,
        "customerMobile": customer.mobile,
        "customerStatus": customer.status,
        "customerStatusId": customer.status_id,
        "customerNationality": customer.nationality,
        "customerDateOfBirth": customer.date_of_birth,
        "customerLicenseType": customer.license_type,
    }


def _refuse_blacklisted(customer: Customer) -> Optional[str]:
    if customer.is_blacklisted(Config.BLACKLISTED_CUSTOMER_STATUS):
        return tr("contract.customer.blacklisted", name=customer.name)
    return None


VEHICLE_CLUSTER_DEFAULTS = {
    "vehiclePlate": "",
    "vehicleSerialNumber": "",
    "vehiclePlateRegistrationType": "",
    "vehicleMakeYear": "",
    "vehicleMake": "",
    "vehicleModel": "",
    "vehicleColor": "",
    "vehicleMileage": 0,
    "vehicleStatus": "",
    "vehicleDailyRentRate": 0,
    "vehicleHourlyDelayRate": 0,
    "vehiclePermittedDailyKm": 0,
    "vehicleExcessKmRate": 0,
    # Pricing step seeds
    "dailyRentalRate": "0",
    "hourlyDelayRate": "0",
    "permittedDailyKm": "0",
    "excessKmRate": "0",
    "currentKm": "0",
}


def _vehicle_cluster(vehicle: Vehicle) -> Dict[str, Any]:
    return {
        "vehiclePlate": vehicle.plate_number,
        "vehicleSerialNumber": vehicle.serial_number,
        "vehiclePlateRegistrationType": vehicle.plate_registration_type,
        "vehicleMakeYear": vehicle.make_year,
        "vehicleMake": vehicle.make,
        "vehicleModel": vehicle.model,
        "vehicleColor": vehicle.color,
        "vehicleMileage": vehicle.mileage,
        "vehicleStatus": vehicle.status or Config.DEFAULT_VEHICLE_STATUS,
        "vehicleDailyRentRate": vehicle.daily_rental_rate,
        "vehicleHourlyDelayRate": vehicle.hourly_delay_rate,
        "vehiclePermittedDailyKm": vehicle.permitted_daily_km,
        "vehicleExcessKmRate": vehicle.excess_km_rate,
        "dailyRentalRate": amount_text(vehicle.daily_rental_rate),
        "hourlyDelayRate": amount_text(vehicle.hourly_delay_rate),
        "permittedDailyKm": str(vehicle.permitted_daily_km),
        "excessKmRate": amount_text(vehicle.excess_km_rate),
        "currentKm": amount_text(vehicle.mileage),
    }


def contract_expansions():
    return [
        SelectionExpansion(
            trigger="selectedCustomerId",
            source=CUSTOMERS,
            expand=_customer_cluster,
            defaults={key: "" for key in CUSTOMER_FIELDS},
            refuse=_refuse_blacklisted,
        ),
        SelectionExpansion(
            trigger="selectedVehicleId",
            source=VEHICLES,
            expand=_vehicle_cluster,
            defaults=dict(VEHICLE_CLUSTER_DEFAULTS),
        ),
        SelectionExpansion(
            trigger="selectedInspector",
            source=INSPECTORS,
            expand=lambda inspector: {"inspectorName": inspector.name},
            defaults={"inspectorName": ""},
        ),
    ]


# ============================================================================
# Derivations
# ============================================================================

def reset_inactive_term(values: Dict[str, Any]) -> Dict[str, Any]:
    """Switching the duration type zeroes the other mode's field."""
    if values.get("durationType") == DURATION:
        return {"totalFees": "0"}
    if values.get("durationType") == FEES:
        return {"durationInDays": "0"}
    return {}


def contract_schedule(values: Dict[str, Any]) -> Dict[str, Any]:
    """End date and rental days from the start date and the contract terms."""
    days = rental_days_for(
        values.get("durationType"),
        values.get("durationInDays"),
        values.get("totalFees"),
        values.get("vehicleDailyRentRate"),
    )
    if days is None:
        return {"endDate": "", "rentalDays": "0"}
    return {
        "endDate": end_date_for(values.get("startDate"), days),
        "rentalDays": str(days),
    }


def contract_total(values: Dict[str, Any]) -> Dict[str, Any]:
    return {"totalAmount": float(compute_total(values))}


def contract_derivations():
    return [
        Derivation("reset_inactive_term", ("durationType",), reset_inactive_term),
        Derivation(
            "contract_schedule",
            ("startDate", "durationType", "durationInDays", "totalFees", "vehicleDailyRentRate"),
            contract_schedule,
        ),
        Derivation(
            "contract_total",
            ("dailyRentalRate", "rentalDays", "membershipEnabled") + add_on_fields(),
            contract_total,
        ),
    ]


def build_contract_resolver(store, dispatcher: FetchDispatcher,
                            lookups: EntityLookupService) -> FieldResolver:
    """Field resolver for one contract session."""
    return FieldResolver(
        store,
        dispatcher,
        option_sources=[OptionSource(INSPECTORS, lookups.get_inspectors)],
        search_sources=[
            SearchSource(CUSTOMERS, lookups.search_customers),
            SearchSource(VEHICLES, lookups.search_vehicles),
        ],
        expansions=contract_expansions(),
        derivations=contract_derivations(),
    )
