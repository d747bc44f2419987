"""
Basic Sample Network — Model
==============================
One asset type, one participant type, one transaction that changes
the asset's value and announces the change.
"""

from core.resources.model import (
    KIND_ASSET,
    KIND_EVENT,
    KIND_PARTICIPANT,
    KIND_TRANSACTION,
    ModelManager,
)

NAMESPACE = "org.acme.sample"

SAMPLE_ASSET = f"{NAMESPACE}.SampleAsset"
SAMPLE_PARTICIPANT = f"{NAMESPACE}.SampleParticipant"
SAMPLE_TRANSACTION = f"{NAMESPACE}.SampleTransaction"
SAMPLE_EVENT = f"{NAMESPACE}.SampleEvent"


def build_model() -> ModelManager:
    model = ModelManager()
    model.declare(NAMESPACE, "SampleAsset", KIND_ASSET,
                  identified_by="asset_id", required=("owner", "value"))
    model.declare(NAMESPACE, "SampleParticipant", KIND_PARTICIPANT,
                  identified_by="participant_id", required=("first_name", "last_name"))
    model.declare(NAMESPACE, "SampleTransaction", KIND_TRANSACTION,
                  required=("asset", "new_value"))
    model.declare(NAMESPACE, "SampleEvent", KIND_EVENT)
    return model
