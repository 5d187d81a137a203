# backend/payflow/presets/catalog.py
"""
Preset Catalog - Example payments narratives and glossary entries
"""

from payflow.presets.registry import GlossaryTerm, Preset, PresetRegistry


# ============================================================
# PRESET NARRATIVES
# ============================================================

ONE_TIME_ECOM = Preset(
    id="one_time_ecom",
    label="One-time e-com",
    text=(
        "Customer submits a one-time card payment for an online order. "
        "Merchant sends an authorization for the full amount. Issuer approves. "
        "Merchant captures funds immediately after order confirmation. "
        "Settlement occurs in batch end-of-day. If the customer requests a refund "
        "the next day, the merchant issues a full refund."
    ),
)

CARD_ON_FILE = Preset(
    id="card_on_file",
    label="Card-on-file (ship later)",
    text=(
        "Customer saves card during checkout for later shipment. Merchant requests "
        "an authorization hold today for the full amount. Two days later at shipment, "
        "the merchant captures. If the customer cancels before shipment, the merchant "
        "voids the authorization."
    ),
)

SUBSCRIPTION_RETRY = Preset(
    id="subscription_retry",
    label="Subscription + retry",
    text=(
        "A monthly subscription renews on the 1st. If authorization fails due to "
        "insufficient funds, the PSP retries after 24h and again after 72h. On success, "
        "capture proceeds. If the customer downgrades mid-cycle, the merchant issues a "
        "prorated partial refund."
    ),
)

PRESET_CATALOG = [
    ONE_TIME_ECOM,
    CARD_ON_FILE,
    SUBSCRIPTION_RETRY,
]


# ============================================================
# GLOSSARY
# ============================================================

GLOSSARY = [
    GlossaryTerm("Authorization (Auth)", "Issuer approves a hold on funds; not yet transferred."),
    GlossaryTerm("Capture", "Merchant moves the held funds into settlement."),
    GlossaryTerm("Settlement", "Funds are batched and paid out to the merchant."),
    GlossaryTerm("Void", "Cancel an authorization before capture; no money moves."),
    GlossaryTerm("Refund", "Return captured funds to the customer (full or partial)."),
]


def register_all(registry: PresetRegistry) -> None:
    for preset in PRESET_CATALOG:
        registry.register(preset)
    for term in GLOSSARY:
        registry.register_term(term)
