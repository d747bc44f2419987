"""
Fund Clearing Network — Access Control
========================================
Banks see every bank but only the transfers and batches they are a
party to. Balances change only inside CompleteSettlement.
"""

from core.permissions import ACTION_ALLOW, OP_CREATE, OP_READ, OP_UPDATE, AclRule
from networks.fund_clearing.models import (
    BANKING_PARTICIPANT,
    BATCH_TRANSFER_REQUEST,
    COMPLETE_SETTLEMENT,
    CREATE_BATCH,
    MARK_POST_PROCESS_COMPLETE,
    MARK_PRE_PROCESS_COMPLETE,
    SUBMIT_TRANSFER_REQUEST,
    TRANSFER_REQUEST,
)


def party_within_transfer_request(transfer_request, participant) -> bool:
    participant_id = participant.get_identifier()
    return (
        transfer_request.from_bank.get_identifier() == participant_id
        or transfer_request.to_bank.get_identifier() == participant_id
    )


def party_within_batch_transfer_request(batch_request, participant) -> bool:
    parties = [party.get_fully_qualified_identifier() for party in batch_request.parties]
    return participant.get_fully_qualified_identifier() in parties


def _transaction_rule(transaction_type: str) -> AclRule:
    name = transaction_type.rpartition(".")[2]
    return AclRule(
        name=f"{name}Transaction",
        description=f"Allow banks to submit {name} transactions",
        participant=BANKING_PARTICIPANT,
        operations=frozenset({OP_CREATE}),
        resource=transaction_type,
        action=ACTION_ALLOW,
    )


RULES = tuple(
    _transaction_rule(transaction_type)
    for transaction_type in (
        SUBMIT_TRANSFER_REQUEST,
        CREATE_BATCH,
        MARK_PRE_PROCESS_COMPLETE,
        COMPLETE_SETTLEMENT,
        MARK_POST_PROCESS_COMPLETE,
    )
) + (
    AclRule(
        name="BankingParticipantRead",
        description="Allow banks to read all banks",
        participant=BANKING_PARTICIPANT,
        operations=frozenset({OP_READ}),
        resource=BANKING_PARTICIPANT,
        action=ACTION_ALLOW,
    ),
    AclRule(
        name="BankingParticipantSettlement",
        description="Allow balances to be updated while settling a batch",
        participant=BANKING_PARTICIPANT,
        operations=frozenset({OP_UPDATE}),
        resource=BANKING_PARTICIPANT,
        transaction=COMPLETE_SETTLEMENT,
        action=ACTION_ALLOW,
    ),
    AclRule(
        name="TransferRequestParty",
        description="Allow the banks named in a TransferRequest to work with it",
        participant=BANKING_PARTICIPANT,
        operations=frozenset({OP_CREATE, OP_READ, OP_UPDATE}),
        resource=TRANSFER_REQUEST,
        condition=lambda p, r, tx: party_within_transfer_request(r, p),
        action=ACTION_ALLOW,
    ),
    AclRule(
        name="BatchTransferRequestParty",
        description="Allow the banks named in a BatchTransferRequest to work with it",
        participant=BANKING_PARTICIPANT,
        operations=frozenset({OP_CREATE, OP_READ, OP_UPDATE}),
        resource=BATCH_TRANSFER_REQUEST,
        condition=lambda p, r, tx: party_within_batch_transfer_request(r, p),
        action=ACTION_ALLOW,
    ),
)
