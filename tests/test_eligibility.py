# tests/test_eligibility.py
"""Unit tests for the eligibility rules."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from datetime import datetime
from decimal import Decimal

import pytest
from motorent.models.rental import Rental
from motorent.services.eligibility import (
    ROLE_DRIVER,
    ROLE_MOTORCYCLE,
    cnpj_is_unique,
    driver_qualifies_for_category_a,
    has_active_rental,
    license_number_is_unique,
    license_type_is_valid,
    plate_is_unique,
)


def add_rental(store, active=True, rental_id="r-1", driver_id="drv-1", motorcycle_id="moto-1"):
    with store.transaction():
        store.add(Rental(
            id=rental_id, driver_id=driver_id, motorcycle_id=motorcycle_id,
            start_date=datetime(2024, 5, 11), expected_end_date=datetime(2024, 5, 18),
            end_date=datetime(2024, 5, 18), plan_days=7,
            daily_rate=Decimal("30.00"), total_value=Decimal("210.00"), active=active,
        ))


class TestPlateUniqueness:
    def test_case_insensitive(self, store, add_motorcycle):
        add_motorcycle(plate="ABC1D23")
        assert not plate_is_unique(store, "abc1d23")
        assert plate_is_unique(store, "XYZ9A87")

    def test_excludes_self(self, store, add_motorcycle):
        add_motorcycle(motorcycle_id="moto-1", plate="ABC1D23")
        assert plate_is_unique(store, "abc1d23", exclude_id="moto-1")
        assert not plate_is_unique(store, "abc1d23", exclude_id="moto-2")


class TestDriverUniqueness:
    def test_cnpj_exact_match(self, store, add_driver):
        add_driver(cnpj="11222333000181")
        assert not cnpj_is_unique(store, "11222333000181")
        assert cnpj_is_unique(store, "11222333000182")
        assert cnpj_is_unique(store, "11222333000181", exclude_id="drv-1")

    def test_license_number_exact_match(self, store, add_driver):
        add_driver(license_number="12345678900")
        assert not license_number_is_unique(store, "12345678900")
        assert license_number_is_unique(store, "12345678900", exclude_id="drv-1")


class TestLicenseRules:
    @pytest.mark.parametrize("license_type", ["A", "B", "AB"])
    def test_valid_types(self, license_type):
        assert license_type_is_valid(license_type)

    @pytest.mark.parametrize("license_type", ["", "C", "a", "BA", "ABC"])
    def test_invalid_types(self, license_type):
        assert not license_type_is_valid(license_type)

    def test_category_a_qualification(self):
        assert driver_qualifies_for_category_a("A")
        assert driver_qualifies_for_category_a("AB")
        assert not driver_qualifies_for_category_a("B")


class TestActiveRental:
    def test_active_rental_found_for_both_roles(self, store):
        add_rental(store)
        assert has_active_rental(store, "drv-1", ROLE_DRIVER)
        assert has_active_rental(store, "moto-1", ROLE_MOTORCYCLE)
        assert not has_active_rental(store, "moto-1", ROLE_DRIVER)

    def test_closed_rental_is_ignored(self, store):
        add_rental(store, active=False)
        assert not has_active_rental(store, "drv-1", ROLE_DRIVER)
        assert not has_active_rental(store, "moto-1", ROLE_MOTORCYCLE)

    def test_unknown_role_rejected(self, store):
        with pytest.raises(ValueError):
            has_active_rental(store, "drv-1", "passenger")
