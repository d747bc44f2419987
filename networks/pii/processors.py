"""
PII Network — Transaction Processors
======================================
The submitting member's `authorized` list holds the ids of members
allowed to read their record. A MemberEvent is emitted only when
the list actually changes.
"""

from core.errors import TransactionError
from networks.pii.models import AUTHORIZE_ACCESS, MEMBER, NAMESPACE, REVOKE_ACCESS


def _current_member(ctx):
    me = ctx.current_participant
    if me is None or not me.is_instance_of(MEMBER):
        raise TransactionError("A participant/certificate mapping does not exist.")
    return me


def _record_change(tx, ctx, me) -> None:
    ctx.emit(ctx.factory.new_event(NAMESPACE, "MemberEvent", member_transaction=tx))
    ctx.participant_registry(MEMBER).update(me)


def authorize_access(tx, ctx):
    me = _current_member(ctx)
    ctx.logger.info(f"**** AUTH: {me.get_identifier()} granting access to {tx.member_id}")

    authorized = list(me.get("authorized") or [])
    if tx.member_id in authorized:
        return

    authorized.append(tx.member_id)
    me.authorized = authorized
    _record_change(tx, ctx, me)


def revoke_access(tx, ctx):
    me = _current_member(ctx)
    ctx.logger.info(f"**** REVOKE: {me.get_identifier()} revoking access to {tx.member_id}")

    authorized = list(me.get("authorized") or [])
    if tx.member_id not in authorized:
        return

    authorized.remove(tx.member_id)
    me.authorized = authorized
    _record_change(tx, ctx, me)


PROCESSORS = {
    AUTHORIZE_ACCESS: authorize_access,
    REVOKE_ACCESS: revoke_access,
}
