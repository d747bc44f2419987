"""
Land Registry Network — Transaction Processors
================================================
Buying real estate costs the buyer:

    notary fees  = 10 % of the price
    agent fees   = agent.fee_rate × price
    insurance    = first monthly payment

The seller receives the full price, which the lending bank pays.
"""

from core.errors import TransactionError
from networks.land_registry.models import (
    BANK,
    BUYING_REAL_ESTATE,
    CONTRACTING_INSURANCE,
    CONTRACTING_LOAN,
    INSURANCE,
    LOAN,
    NAMESPACE,
    NOTARY,
    NOTARY_FEE_RATE,
    PRIVATE_INDIVIDUAL,
    REAL_ESTATE,
    REAL_ESTATE_AGENT,
)


def _ids(*resources) -> str:
    return "".join(str(resource.get_identifier()) for resource in resources)


def contracting_insurance(tx, ctx):
    insurance = ctx.factory.new_resource(
        NAMESPACE, "Insurance", _ids(tx.insured, tx.insurance_company, tx.real_estate)
    )
    insurance.insured = tx.insured
    insurance.insurance_company = tx.insurance_company
    insurance.real_estate = tx.real_estate
    insurance.duration_in_months = tx.duration_in_months
    insurance.monthly_cost = tx.monthly_cost
    ctx.asset_registry(INSURANCE).add(insurance)


def contracting_loan(tx, ctx):
    if tx.bank.balance < tx.real_estate.price:
        raise TransactionError("The bank can't afford this investment!")

    loan = ctx.factory.new_resource(
        NAMESPACE, "Loan", _ids(tx.debtor, tx.real_estate, tx.bank)
    )
    loan.debtor = tx.debtor
    loan.bank = tx.bank
    loan.interest_rate = tx.interest_rate
    loan.duration_in_months = tx.duration_in_months
    loan.real_estate = tx.real_estate
    loan.amount = tx.real_estate.price
    ctx.asset_registry(LOAN).add(loan)


def buying_real_estate(tx, ctx):
    price = tx.real_estate.price
    notary_fees = NOTARY_FEE_RATE * price
    agent_fees = tx.real_estate_agent.fee_rate * price
    total_cost = notary_fees + agent_fees + tx.insurance.monthly_cost

    tx.seller.balance += price

    if tx.buyer.balance < total_cost:
        raise TransactionError("Not enough funds to buy this!")

    tx.buyer.balance -= total_cost
    tx.real_estate.owner = tx.buyer
    tx.real_estate_agent.balance += agent_fees
    tx.notary.balance += notary_fees
    if tx.is_new_owner_main_residence:
        tx.buyer.address = tx.real_estate.address

    ctx.asset_registry(REAL_ESTATE).update(tx.real_estate)
    ctx.participant_registry(PRIVATE_INDIVIDUAL).update_all([tx.seller, tx.buyer])
    ctx.participant_registry(NOTARY).update(tx.notary)
    ctx.participant_registry(REAL_ESTATE_AGENT).update(tx.real_estate_agent)

    banks = ctx.participant_registry(BANK)
    bank = banks.get(tx.loan.bank.get_identifier())
    bank.balance -= price
    banks.update(bank)


PROCESSORS = {
    CONTRACTING_INSURANCE: contracting_insurance,
    CONTRACTING_LOAN: contracting_loan,
    BUYING_REAL_ESTATE: buying_real_estate,
}
