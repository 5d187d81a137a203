from typing import Dict, List


LIFELINES = ["Customer", "Merchant", "PSP", "Network", "Issuer"]
LIFECYCLE_STEPS = ["authorization", "capture", "settlement", "refund or void"]

SYSTEM_PROMPT = (
    "You convert payments narratives into accurate Mermaid sequence diagrams."
)

USER_PROMPT_TEMPLATE = """
Lifelines: {lifelines}.
Include: {steps} if relevant.
Return JSON only: {{ "mermaid": "...", "notes": "- bullet\\n- bullet" }}

Narrative:
<<<{flow}>>>"""


def build_user_prompt(flow: str) -> str:
    return USER_PROMPT_TEMPLATE.format(
        lifelines=", ".join(LIFELINES),
        steps=", ".join(LIFECYCLE_STEPS),
        flow=flow,
    )


def build_messages(flow: str) -> List[Dict[str, str]]:
    """System + user chat messages for one narrative. The narrative goes in as submitted."""
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": build_user_prompt(flow)},
    ]
