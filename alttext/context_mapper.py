"""
Context mapper: classifier label → church-domain phrase.
"""
from church_contexts import CONTEXT_RULES


def map_label(base_label: str, reference: int, rules=CONTEXT_RULES) -> str:
    """Return the church phrase for base_label, or base_label itself.

    The first rule (in table order) with any trigger contained in the
    lowercased label wins; its candidate is picked by reference mod length.
    """
    lowered = base_label.lower()
    for triggers, candidates in rules:
        if any(trigger in lowered for trigger in triggers):
            return candidates[reference % len(candidates)]
    return base_label
