"""
Letters of Credit Network — Transaction Processors
====================================================
Each processor checks the letter's status, moves it one step and
emits the matching event. CLOSED and REJECTED letters accept
nothing further.
"""

from core.errors import TransactionError
from core.resources.resource import Resource, same_target
from networks.letters_of_credit.events import loc_event
from networks.letters_of_credit.models import (
    APPROVE,
    APPROVED,
    AWAITING_APPROVAL,
    BANK,
    BANK_EMPLOYEE,
    CLOSE,
    CLOSED,
    CREATE_DEMO_PARTICIPANTS,
    CUSTOMER,
    INITIAL_APPLICATION,
    LETTER_OF_CREDIT,
    NAMESPACE,
    READY_FOR_PAYMENT,
    READY_FOR_PAYMENT_STATUS,
    RECEIVE_PRODUCT,
    RECEIVED,
    REJECT,
    REJECTED,
    REQUIRED_APPROVALS,
    SHIP_PRODUCT,
    SHIPPED,
    SUGGEST_CHANGES,
)

ALREADY_CLOSED = "This letter of credit has already been closed"
ALREADY_APPROVED = "This letter of credit has already been approved"
ALREADY_SHIPPED = "The product has already been shipped"


def _is_closed(letter) -> bool:
    return letter.status in (CLOSED, REJECTED)


def _save(ctx, letter) -> None:
    ctx.asset_registry(LETTER_OF_CREDIT).update(letter)


def _employer_id(party):
    """Bank id of a resolved bank employee; None for anyone else."""
    if not isinstance(party, Resource) or not party.is_instance_of(BANK_EMPLOYEE):
        return None
    bank = party.get("bank")
    return bank.get_identifier() if bank is not None else None


def initial_application(tx, ctx):
    factory = ctx.factory
    applicant = tx.applicant
    beneficiary = tx.beneficiary

    letter = factory.new_resource(
        NAMESPACE, "LetterOfCredit", tx.letter_id,
        applicant=factory.new_relationship(NAMESPACE, "Customer", applicant.get_identifier()),
        beneficiary=factory.new_relationship(NAMESPACE, "Customer", beneficiary.get_identifier()),
        issuing_bank=factory.new_relationship(NAMESPACE, "Bank", applicant.bank.get_identifier()),
        exporting_bank=factory.new_relationship(NAMESPACE, "Bank", beneficiary.bank.get_identifier()),
        rules=tx.rules,
        product_details=tx.product_details,
        evidence=[],
        approval=[factory.new_relationship(NAMESPACE, "Customer", applicant.get_identifier())],
        status=AWAITING_APPROVAL,
    )
    ctx.asset_registry(LETTER_OF_CREDIT).add(letter)
    ctx.emit(loc_event(factory, "InitialApplicationEvent", letter))


def approve(tx, ctx):
    letter = tx.loc
    party = tx.approving_party
    approval = list(letter.approval or [])

    if _is_closed(letter):
        raise TransactionError(ALREADY_CLOSED)
    if len(approval) == REQUIRED_APPROVALS:
        raise TransactionError("All four parties have already approved this letter of credit")
    if any(same_target(existing, party) for existing in approval):
        raise TransactionError("This person has already approved this letter of credit")
    if party.get_fully_qualified_type() == BANK_EMPLOYEE:
        bank_id = _employer_id(party)
        if bank_id is not None and any(_employer_id(existing) == bank_id for existing in approval):
            raise TransactionError("Your bank has already approved of this request")

    approval.append(ctx.factory.new_relationship(NAMESPACE, party.get_type(), party.get_identifier()))
    letter.approval = approval
    if len(approval) == REQUIRED_APPROVALS:
        letter.status = APPROVED

    _save(ctx, letter)
    ctx.emit(loc_event(ctx.factory, "ApproveEvent", letter, approving_party=party))


def reject(tx, ctx):
    letter = tx.loc
    if _is_closed(letter):
        raise TransactionError(ALREADY_CLOSED)
    if letter.status == APPROVED:
        raise TransactionError(ALREADY_APPROVED)

    letter.status = REJECTED
    letter.close_reason = tx.close_reason
    _save(ctx, letter)
    ctx.emit(loc_event(ctx.factory, "RejectEvent", letter, close_reason=tx.close_reason))


def suggest_changes(tx, ctx):
    letter = tx.loc
    if _is_closed(letter):
        raise TransactionError(ALREADY_CLOSED)
    if letter.status == APPROVED:
        raise TransactionError(ALREADY_APPROVED)
    if letter.status in (SHIPPED, RECEIVED, READY_FOR_PAYMENT_STATUS):
        raise TransactionError(ALREADY_SHIPPED)

    # new rules need everyone's approval again
    letter.rules = tx.rules
    letter.approval = [tx.suggesting_party]
    letter.status = AWAITING_APPROVAL
    _save(ctx, letter)
    ctx.emit(loc_event(
        ctx.factory, "SuggestChangesEvent", letter,
        rules=tx.rules, suggesting_party=tx.suggesting_party,
    ))


def ship_product(tx, ctx):
    letter = tx.loc
    if letter.status == AWAITING_APPROVAL:
        raise TransactionError(
            "This letter needs to be fully approved before the product can be shipped"
        )
    if _is_closed(letter):
        raise TransactionError(ALREADY_CLOSED)
    if letter.status != APPROVED:
        raise TransactionError(ALREADY_SHIPPED)

    letter.status = SHIPPED
    letter.evidence = list(letter.get("evidence") or []) + [tx.evidence]
    _save(ctx, letter)
    ctx.emit(loc_event(ctx.factory, "ShipProductEvent", letter))


def receive_product(tx, ctx):
    letter = tx.loc
    if letter.status in (AWAITING_APPROVAL, APPROVED):
        raise TransactionError("The product needs to be shipped before it can be received")
    if _is_closed(letter):
        raise TransactionError(ALREADY_CLOSED)
    if letter.status != SHIPPED:
        raise TransactionError("The product has already been received")

    letter.status = RECEIVED
    _save(ctx, letter)
    ctx.emit(loc_event(ctx.factory, "ReceiveProductEvent", letter))


def ready_for_payment(tx, ctx):
    letter = tx.loc
    if _is_closed(letter):
        raise TransactionError(ALREADY_CLOSED)
    if letter.status == READY_FOR_PAYMENT_STATUS:
        raise TransactionError("The payment has already been made")
    if letter.status != RECEIVED:
        raise TransactionError(
            "The payment cannot be made until the product has been received by the applicant"
        )

    letter.status = READY_FOR_PAYMENT_STATUS
    _save(ctx, letter)
    ctx.emit(loc_event(ctx.factory, "ReadyForPaymentEvent", letter))


def close(tx, ctx):
    letter = tx.loc
    if _is_closed(letter):
        raise TransactionError(ALREADY_CLOSED)
    if letter.status != READY_FOR_PAYMENT_STATUS:
        raise TransactionError(
            "Cannot close this letter of credit until it is fully approved and "
            "the product has been received by the applicant"
        )

    letter.status = CLOSED
    letter.close_reason = tx.close_reason
    _save(ctx, letter)
    ctx.emit(loc_event(ctx.factory, "CloseEvent", letter, close_reason=tx.close_reason))


def create_demo_participants(tx, ctx):
    factory = ctx.factory

    banks = ctx.participant_registry(BANK)
    banks.add(factory.new_resource(NAMESPACE, "Bank", "BoD", name="Bank of Dinero"))
    banks.add(factory.new_resource(NAMESPACE, "Bank", "EB", name="Eastwood Banking"))

    employees = ctx.participant_registry(BANK_EMPLOYEE)
    employees.add(factory.new_resource(
        NAMESPACE, "BankEmployee", "matias",
        name="Matías", bank=factory.new_relationship(NAMESPACE, "Bank", "BoD"),
    ))
    employees.add(factory.new_resource(
        NAMESPACE, "BankEmployee", "ella",
        name="Ella", bank=factory.new_relationship(NAMESPACE, "Bank", "EB"),
    ))

    customers = ctx.participant_registry(CUSTOMER)
    customers.add(factory.new_resource(
        NAMESPACE, "Customer", "alice",
        name="Alice", last_name="Hamilton", company_name="QuickFix IT",
        bank=factory.new_relationship(NAMESPACE, "Bank", "BoD"),
    ))
    customers.add(factory.new_resource(
        NAMESPACE, "Customer", "bob",
        name="Bob", last_name="Appleton", company_name="Conga Computers",
        bank=factory.new_relationship(NAMESPACE, "Bank", "EB"),
    ))


PROCESSORS = {
    INITIAL_APPLICATION: initial_application,
    APPROVE: approve,
    REJECT: reject,
    SUGGEST_CHANGES: suggest_changes,
    SHIP_PRODUCT: ship_product,
    RECEIVE_PRODUCT: receive_product,
    READY_FOR_PAYMENT: ready_for_payment,
    CLOSE: close,
    CREATE_DEMO_PARTICIPANTS: create_demo_participants,
}
