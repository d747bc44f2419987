"""
Land Registry Network — Scenario Tests
========================================
Damien (30000) buys Sarah's BUILDING_ONE (price 100000) with a loan from
BANK_ONE, an AXA insurance at 100 per month, agent fee 7% and notary
fee 10%.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from core.registry import InMemoryWorldStateStore
from core.runtime import EmbeddedRuntime
from core.time.clock import FixedClock
from core.transactions import ReasonCode, TransactionRejected
from networks.land_registry import build_network
from networks.land_registry.models import (
    BANK,
    INSURANCE,
    INSURANCE_COMPANY,
    LOAN,
    NAMESPACE,
    NOTARY,
    PRIVATE_INDIVIDUAL,
    REAL_ESTATE,
    REAL_ESTATE_AGENT,
)
from networks.land_registry.transactions import (
    BuyingRealEstateRequest,
    ContractingInsuranceRequest,
    ContractingLoanRequest,
)

NOW = datetime(2026, 2, 19, 12, 0, 0, tzinfo=timezone.utc)
LOAN_ID = "damienBUILDING_ONEBANK_ONE"
INSURANCE_ID = "damienINSURANCE_COMP_ONEBUILDING_ONE"


@pytest.fixture
def admin():
    runtime = EmbeddedRuntime(store=InMemoryWorldStateStore(), clock=FixedClock(NOW))
    runtime.deploy(build_network())
    admin = runtime.connect()
    factory = admin.factory

    admin.get_participant_registry(PRIVATE_INDIVIDUAL).add_all([
        factory.new_resource(
            NAMESPACE, "PrivateIndividual", "damien",
            name="Damien Cosset", balance=30000, address="France",
        ),
        factory.new_resource(
            NAMESPACE, "PrivateIndividual", "sarah",
            name="Sarah Jones", balance=10000, address="USA",
        ),
    ])
    admin.get_participant_registry(BANK).add(
        factory.new_resource(NAMESPACE, "Bank", "BANK_ONE", name="Bank of America", balance=250000)
    )
    admin.get_participant_registry(INSURANCE_COMPANY).add(
        factory.new_resource(NAMESPACE, "InsuranceCompany", "INSURANCE_COMP_ONE", name="AXA", balance=5000)
    )
    admin.get_participant_registry(REAL_ESTATE_AGENT).add(
        factory.new_resource(
            NAMESPACE, "RealEstateAgent", "AGENT_ONE",
            name="Agent Smith", balance=2000, fee_rate=0.07,
        )
    )
    admin.get_participant_registry(NOTARY).add(
        factory.new_resource(NAMESPACE, "Notary", "NOTARY_ONE", name="Ethan Doe", balance=1000)
    )
    admin.get_asset_registry(REAL_ESTATE).add(
        factory.new_resource(
            NAMESPACE, "RealEstate", "BUILDING_ONE",
            address="123, Evergreen Terasse, Springfield",
            square_meters=100,
            price=100000,
            owner=factory.new_relationship(NAMESPACE, "PrivateIndividual", "sarah"),
        )
    )
    return admin


def _contract_insurance(admin):
    admin.submit_transaction(
        ContractingInsuranceRequest("damien", "INSURANCE_COMP_ONE", "BUILDING_ONE", 100, 12)
        .to_transaction(admin.factory)
    )


def _contract_loan(admin):
    admin.submit_transaction(
        ContractingLoanRequest("damien", "BANK_ONE", "BUILDING_ONE", 0.035, 300)
        .to_transaction(admin.factory)
    )


def _buy(admin, main_residence=True):
    admin.submit_transaction(
        BuyingRealEstateRequest(
            "damien", "sarah", "BUILDING_ONE", LOAN_ID, "AGENT_ONE", "NOTARY_ONE", INSURANCE_ID,
            is_new_owner_main_residence=main_residence,
        ).to_transaction(admin.factory)
    )


def _individual(admin, name):
    return admin.get_participant_registry(PRIVATE_INDIVIDUAL).get(name)


class TestContracting:
    def test_insurance_created(self, admin):
        _contract_insurance(admin)
        [insurance] = admin.get_asset_registry(INSURANCE).get_all()
        assert insurance.get_identifier() == INSURANCE_ID
        assert insurance.monthly_cost == 100
        assert insurance.duration_in_months == 12
        assert insurance.insured.get_identifier() == "damien"

    def test_loan_created(self, admin):
        _contract_loan(admin)
        [loan] = admin.get_asset_registry(LOAN).get_all()
        assert loan.get_identifier() == LOAN_ID
        assert loan.amount == 100000
        assert loan.interest_rate == 0.035
        assert loan.bank.get_identifier() == "BANK_ONE"

    def test_bank_cannot_afford(self, admin):
        banks = admin.get_participant_registry(BANK)
        bank = banks.get("BANK_ONE")
        bank.balance = 50000
        banks.update(bank)

        with pytest.raises(TransactionRejected, match="The bank can't afford this investment!") as exc:
            _contract_loan(admin)
        assert exc.value.code == ReasonCode.PROCESSOR_ERROR
        assert admin.get_asset_registry(LOAN).get_all() == []


class TestBuyingRealEstate:
    def test_purchase_settles_every_party(self, admin):
        _contract_insurance(admin)
        _contract_loan(admin)
        _buy(admin)

        damien = _individual(admin, "damien")
        assert damien.balance == pytest.approx(12900)
        assert damien.address == "123, Evergreen Terasse, Springfield"
        assert _individual(admin, "sarah").balance == 110000
        assert admin.get_participant_registry(BANK).get("BANK_ONE").balance == 150000
        assert admin.get_participant_registry(REAL_ESTATE_AGENT).get("AGENT_ONE").balance == pytest.approx(9000)
        assert admin.get_participant_registry(NOTARY).get("NOTARY_ONE").balance == 11000
        building = admin.get_asset_registry(REAL_ESTATE).get("BUILDING_ONE")
        assert building.owner.get_identifier() == "damien"

    def test_address_kept_when_not_main_residence(self, admin):
        _contract_insurance(admin)
        _contract_loan(admin)
        _buy(admin, main_residence=False)
        assert _individual(admin, "damien").address == "France"

    def test_not_enough_funds_rolls_back_seller(self, admin):
        _contract_insurance(admin)
        _contract_loan(admin)
        people = admin.get_participant_registry(PRIVATE_INDIVIDUAL)
        damien = people.get("damien")
        damien.balance = 1000
        people.update(damien)

        with pytest.raises(TransactionRejected, match="Not enough funds to buy this!"):
            _buy(admin)

        assert _individual(admin, "sarah").balance == 10000
        assert _individual(admin, "damien").balance == 1000
        building = admin.get_asset_registry(REAL_ESTATE).get("BUILDING_ONE")
        assert building.owner.get_identifier() == "sarah"


class TestRequestValidation:
    def test_negative_monthly_cost(self):
        with pytest.raises(ValueError, match="monthly_cost"):
            ContractingInsuranceRequest("damien", "INSURANCE_COMP_ONE", "BUILDING_ONE", -1, 12)

    def test_zero_duration(self):
        with pytest.raises(ValueError, match="duration_in_months"):
            ContractingLoanRequest("damien", "BANK_ONE", "BUILDING_ONE", 0.035, 0)

    def test_buyer_is_seller(self):
        with pytest.raises(ValueError, match="buyer and seller must differ"):
            BuyingRealEstateRequest("sarah", "sarah", "B", "L", "A", "N", "I")
