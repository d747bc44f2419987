"""
Fund Clearing Network — Transaction Processors
================================================
Netting arithmetic works in US dollars: a transfer of `amount` in
currency C is worth amount / rate(C) dollars, where rate(C) is the
number of C bought by one dollar.
"""

from core.errors import TransactionError
from core.resources.resource import RESOURCE_URI_PREFIX
from networks.fund_clearing.models import (
    BANKING_PARTICIPANT,
    BATCH_TRANSFER_REQUEST,
    COMPLETE,
    COMPLETE_SETTLEMENT,
    CREATE_BATCH,
    MARK_POST_PROCESS_COMPLETE,
    MARK_PRE_PROCESS_COMPLETE,
    NAMESPACE,
    PENDING,
    PENDING_POST_PROCESS,
    PENDING_PRE_PROCESS,
    PRE_PROCESS_COMPLETE,
    PROCESSING,
    READY_TO_SETTLE,
    SUBMIT_TRANSFER_REQUEST,
    TRANSFER_REQUEST,
    USD,
)


# ══════════════════════════════════════════════════════════════
# NETTING
# ══════════════════════════════════════════════════════════════

def usd_rate(rates, currency: str) -> float:
    for rate in rates:
        if rate.to == currency:
            return rate.rate
    raise TransactionError(f"No USD exchange rate supplied for currency {currency}")


def _in_usd(details, rates) -> float:
    if details.currency == USD:
        return details.amount
    return details.amount / usd_rate(rates, details.currency)


def net_transfers(transfer_requests, participant_id: str, rates) -> float:
    """
    Net USD value of transfer_requests from participant_id's side:
    positive when the participant is owed money.
    """
    amount = 0
    for request in transfer_requests:
        if request.to_bank.get_identifier() == participant_id:
            amount += _in_usd(request.details, rates)
        else:
            amount -= _in_usd(request.details, rates)
    return amount


def adjust_settlement(amount: float, rates, creditor_currency: str, debtor_currency: str) -> float:
    """Convert a settlement in the creditor's currency into the debtor's."""
    if creditor_currency == debtor_currency:
        return amount
    from_rate = 1
    to_rate = 1
    if creditor_currency != USD:
        to_rate = usd_rate(rates, creditor_currency)
    if debtor_currency != USD:
        from_rate = usd_rate(rates, debtor_currency)
    return amount * (from_rate / to_rate)


def _bank_uri(bank_id: str) -> str:
    return f"{RESOURCE_URI_PREFIX}{BANKING_PARTICIPANT}#{bank_id}"


def _wrong_state(batch_id, state, expected) -> TransactionError:
    return TransactionError(
        f"Unable to process transaction, BatchTransferRequest with id {batch_id} "
        f"is in state {state} but must be in state '{expected}'"
    )


def _mark_transfers(ctx, batch, side_state: str) -> bool:
    """
    Mark the caller's side of every transfer in the batch; a transfer
    whose two sides agree takes that state too. Returns True when all
    transfers in the batch have reached side_state.
    """
    transfers = ctx.asset_registry(TRANSFER_REQUEST)
    me = ctx.current_participant.get_identifier()

    changed = []
    all_done = True
    for reference in batch.transfer_requests:
        transfer = transfers.get(reference.get_identifier())
        if transfer.to_bank.get_identifier() == me:
            transfer.to_bank_state = side_state
            if transfer.to_bank_state == side_state and transfer.from_bank_state == side_state:
                transfer.state = side_state
            changed.append(transfer)
        if transfer.from_bank.get_identifier() == me:
            transfer.from_bank_state = side_state
            if transfer.to_bank_state == side_state and transfer.from_bank_state == side_state:
                transfer.state = side_state
            changed.append(transfer)
        if transfer.state != side_state:
            all_done = False

    transfers.update_all(changed)
    return all_done


# ══════════════════════════════════════════════════════════════
# PROCESSORS
# ══════════════════════════════════════════════════════════════

def submit_transfer_request(tx, ctx):
    factory = ctx.factory
    to_bank = ctx.participant_registry(BANKING_PARTICIPANT).get(tx.to_bank)

    request = factory.new_resource(
        NAMESPACE, "TransferRequest", tx.transfer_id,
        details=tx.details,
        state=PENDING,
        from_bank=factory.new_relationship(
            NAMESPACE, "BankingParticipant", ctx.current_participant.get_identifier()
        ),
        from_bank_state=tx.state,
        to_bank=factory.new_relationship(NAMESPACE, "BankingParticipant", to_bank.get_identifier()),
        to_bank_state=PENDING,
    )
    ctx.asset_registry(TRANSFER_REQUEST).add(request)


def create_batch(tx, ctx):
    factory = ctx.factory
    batches = ctx.asset_registry(BATCH_TRANSFER_REQUEST)
    transfers = ctx.asset_registry(TRANSFER_REQUEST)

    me = ctx.current_participant
    my_id = me.get_identifier()
    participants = ctx.participant_registry(BANKING_PARTICIPANT).get_all()

    if len(participants) <= 1:
        raise TransactionError(
            "Insufficient number of BankingParticipant(s) to proceed with batch creation"
        )

    for other in participants:
        other_id = other.get_identifier()
        if other_id == my_id:
            continue

        pending = ctx.query(
            "TransferRequestsByBanksInState",
            bank1=_bank_uri(my_id), bank2=_bank_uri(other_id), state=PENDING,
        )
        if not pending:
            continue

        amount = net_transfers(pending, my_id, tx.usd_rates)
        if amount >= 0:
            creditor, debtor = my_id, other_id
            currency = me.working_currency
        else:
            creditor, debtor = other_id, my_id
            currency = other.working_currency

        if currency != USD:
            amount = amount * usd_rate(tx.usd_rates, currency)

        settlement = factory.new_concept(
            NAMESPACE, "Settlement",
            amount=abs(amount),
            currency=currency,
            creditor_bank=factory.new_relationship(NAMESPACE, "BankingParticipant", creditor),
            debtor_bank=factory.new_relationship(NAMESPACE, "BankingParticipant", debtor),
        )
        batch = factory.new_resource(
            NAMESPACE, "BatchTransferRequest", f"{tx.batch_id}:{my_id}-{other_id}",
            settlement=settlement,
            parties=[
                factory.new_relationship(NAMESPACE, "BankingParticipant", my_id),
                factory.new_relationship(NAMESPACE, "BankingParticipant", other_id),
            ],
            state=PENDING_PRE_PROCESS,
            transfer_requests=[
                factory.new_relationship(NAMESPACE, "TransferRequest", request.get_identifier())
                for request in pending
            ],
        )
        batches.add(batch)

        for request in pending:
            request.state = PROCESSING
            transfers.update(request)

        ctx.logger.info(f"Batch {batch.get_identifier()} settles {settlement.amount} {currency}")
        ctx.emit(factory.new_event(NAMESPACE, "BatchCreatedEvent", batch_id=batch.get_identifier()))


def mark_pre_process_complete(tx, ctx):
    batches = ctx.asset_registry(BATCH_TRANSFER_REQUEST)
    batch = batches.get(tx.batch_id)

    if _mark_transfers(ctx, batch, PRE_PROCESS_COMPLETE):
        batch.state = READY_TO_SETTLE
        batches.update(batch)


def complete_settlement(tx, ctx):
    banks = ctx.participant_registry(BANKING_PARTICIPANT)
    batches = ctx.asset_registry(BATCH_TRANSFER_REQUEST)
    batch = batches.get(tx.batch_id)

    if batch.state != READY_TO_SETTLE:
        raise _wrong_state(tx.batch_id, batch.state, READY_TO_SETTLE)

    settlement = batch.settlement
    creditor = banks.get(settlement.creditor_bank.get_identifier())
    debtor = banks.get(settlement.debtor_bank.get_identifier())

    debtor_amount = adjust_settlement(
        settlement.amount, tx.usd_rates, creditor.working_currency, debtor.working_currency
    )
    creditor.fund_balance = creditor.get("fund_balance", 0.0) + settlement.amount
    debtor.fund_balance = debtor.get("fund_balance", 0.0) - debtor_amount
    banks.update(creditor)
    banks.update(debtor)

    batch.state = PENDING_POST_PROCESS
    batches.update(batch)


def mark_post_process_complete(tx, ctx):
    batches = ctx.asset_registry(BATCH_TRANSFER_REQUEST)
    batch = batches.get(tx.batch_id)

    if batch.state != PENDING_POST_PROCESS:
        raise _wrong_state(tx.batch_id, batch.state, PENDING_POST_PROCESS)

    if _mark_transfers(ctx, batch, COMPLETE):
        batch.state = COMPLETE
        batches.update(batch)


PROCESSORS = {
    SUBMIT_TRANSFER_REQUEST: submit_transfer_request,
    CREATE_BATCH: create_batch,
    MARK_PRE_PROCESS_COMPLETE: mark_pre_process_complete,
    COMPLETE_SETTLEMENT: complete_settlement,
    MARK_POST_PROCESS_COMPLETE: mark_post_process_complete,
}
