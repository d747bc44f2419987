"""
Land Registry Network — Model
===============================
Private individuals buy real estate with a bank loan and an
insurance, paying notary and estate agent fees.
"""

from core.resources.model import KIND_ASSET, KIND_PARTICIPANT, KIND_TRANSACTION, ModelManager

NAMESPACE = "org.acme.landregistry"

PRIVATE_INDIVIDUAL = f"{NAMESPACE}.PrivateIndividual"
BANK = f"{NAMESPACE}.Bank"
INSURANCE_COMPANY = f"{NAMESPACE}.InsuranceCompany"
NOTARY = f"{NAMESPACE}.Notary"
REAL_ESTATE_AGENT = f"{NAMESPACE}.RealEstateAgent"
REAL_ESTATE = f"{NAMESPACE}.RealEstate"
LOAN = f"{NAMESPACE}.Loan"
INSURANCE = f"{NAMESPACE}.Insurance"
BUYING_REAL_ESTATE = f"{NAMESPACE}.BuyingRealEstate"
CONTRACTING_INSURANCE = f"{NAMESPACE}.ContractingInsurance"
CONTRACTING_LOAN = f"{NAMESPACE}.ContractingLoan"

NOTARY_FEE_RATE = 0.1

USER_TYPES = ("PrivateIndividual", "Bank", "InsuranceCompany", "Notary")


def build_model() -> ModelManager:
    model = ModelManager()
    for name in USER_TYPES:
        model.declare(NAMESPACE, name, KIND_PARTICIPANT,
                      identified_by="id", required=("name", "balance"))
    model.declare(NAMESPACE, "RealEstateAgent", KIND_PARTICIPANT,
                  identified_by="id", required=("name", "balance", "fee_rate"))
    model.declare(NAMESPACE, "RealEstate", KIND_ASSET,
                  identified_by="id", required=("address", "square_meters", "price", "owner"))
    model.declare(NAMESPACE, "Loan", KIND_ASSET,
                  identified_by="id",
                  required=("amount", "interest_rate", "debtor", "bank", "real_estate",
                            "duration_in_months"))
    model.declare(NAMESPACE, "Insurance", KIND_ASSET,
                  identified_by="id",
                  required=("real_estate", "insured", "insurance_company", "monthly_cost",
                            "duration_in_months"))
    model.declare(NAMESPACE, "BuyingRealEstate", KIND_TRANSACTION,
                  required=("buyer", "seller", "real_estate", "loan", "real_estate_agent",
                            "notary", "insurance", "is_new_owner_main_residence"))
    model.declare(NAMESPACE, "ContractingInsurance", KIND_TRANSACTION,
                  required=("insured", "insurance_company", "real_estate", "monthly_cost",
                            "duration_in_months"))
    model.declare(NAMESPACE, "ContractingLoan", KIND_TRANSACTION,
                  required=("debtor", "bank", "real_estate", "interest_rate",
                            "duration_in_months"))
    return model
