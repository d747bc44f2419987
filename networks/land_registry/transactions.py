"""
Land Registry Network — Transaction Requests
==============================================
"""

from __future__ import annotations

from dataclasses import dataclass

from networks.land_registry.models import NAMESPACE


@dataclass(frozen=True)
class ContractingInsuranceRequest:
    """Insure a property with an insurance company."""
    insured_id: str
    insurance_company_id: str
    real_estate_id: str
    monthly_cost: float
    duration_in_months: int

    def __post_init__(self):
        if self.monthly_cost < 0:
            raise ValueError("monthly_cost must be >= 0.")
        if self.duration_in_months <= 0:
            raise ValueError("duration_in_months must be > 0.")

    def to_transaction(self, factory):
        return factory.new_transaction(
            NAMESPACE, "ContractingInsurance",
            insured=factory.new_relationship(NAMESPACE, "PrivateIndividual", self.insured_id),
            insurance_company=factory.new_relationship(NAMESPACE, "InsuranceCompany", self.insurance_company_id),
            real_estate=factory.new_relationship(NAMESPACE, "RealEstate", self.real_estate_id),
            monthly_cost=self.monthly_cost,
            duration_in_months=self.duration_in_months,
        )


@dataclass(frozen=True)
class ContractingLoanRequest:
    """Borrow the price of a property from a bank."""
    debtor_id: str
    bank_id: str
    real_estate_id: str
    interest_rate: float
    duration_in_months: int

    def __post_init__(self):
        if self.interest_rate < 0:
            raise ValueError("interest_rate must be >= 0.")
        if self.duration_in_months <= 0:
            raise ValueError("duration_in_months must be > 0.")

    def to_transaction(self, factory):
        return factory.new_transaction(
            NAMESPACE, "ContractingLoan",
            debtor=factory.new_relationship(NAMESPACE, "PrivateIndividual", self.debtor_id),
            bank=factory.new_relationship(NAMESPACE, "Bank", self.bank_id),
            real_estate=factory.new_relationship(NAMESPACE, "RealEstate", self.real_estate_id),
            interest_rate=self.interest_rate,
            duration_in_months=self.duration_in_months,
        )


@dataclass(frozen=True)
class BuyingRealEstateRequest:
    """Buy a property financed by a loan and covered by an insurance."""
    buyer_id: str
    seller_id: str
    real_estate_id: str
    loan_id: str
    real_estate_agent_id: str
    notary_id: str
    insurance_id: str
    is_new_owner_main_residence: bool = False

    def __post_init__(self):
        if self.buyer_id == self.seller_id:
            raise ValueError("buyer and seller must differ.")

    def to_transaction(self, factory):
        return factory.new_transaction(
            NAMESPACE, "BuyingRealEstate",
            buyer=factory.new_relationship(NAMESPACE, "PrivateIndividual", self.buyer_id),
            seller=factory.new_relationship(NAMESPACE, "PrivateIndividual", self.seller_id),
            real_estate=factory.new_relationship(NAMESPACE, "RealEstate", self.real_estate_id),
            loan=factory.new_relationship(NAMESPACE, "Loan", self.loan_id),
            real_estate_agent=factory.new_relationship(NAMESPACE, "RealEstateAgent", self.real_estate_agent_id),
            notary=factory.new_relationship(NAMESPACE, "Notary", self.notary_id),
            insurance=factory.new_relationship(NAMESPACE, "Insurance", self.insurance_id),
            is_new_owner_main_residence=self.is_new_owner_main_residence,
        )
