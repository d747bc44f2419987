"""
Fund Clearing Network — Named Queries
=======================================
Bank parameters are relationship URIs, e.g.
'resource:org.clearing.BankingParticipant#Bank0'.
"""

from core.runtime.query import Query
from networks.fund_clearing.models import TRANSFER_REQUEST


def _between_banks_in_state(request, params) -> bool:
    banks = {request.from_bank.to_uri(), request.to_bank.to_uri()}
    return (
        banks == {params["bank1"], params["bank2"]}
        and params["bank1"] != params["bank2"]
        and request.state == params["state"]
    )


QUERIES = (
    Query(
        name="TransferRequestsByBanksInState",
        description="Select all TransferRequests between two banks in a given state",
        resource_type=TRANSFER_REQUEST,
        predicate=_between_banks_in_state,
        parameters=("bank1", "bank2", "state"),
    ),
)
