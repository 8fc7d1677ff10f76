"""Phase and pregnancy-chance classification of a cycle day.

Two independent range tables are evaluated against the same cycle day:

    Phase                       Pregnancy chance
    1–5    Menstrual            11–17          High
    6–10   Follicular           8–10, 18–20    Medium
    11–14  Ovulatory            otherwise      Low
    15–28  Luteal
    29+    Extended

The tables do not share boundaries: day 15 is Luteal yet still
High chance.
"""

from __future__ import annotations

import logging

from cyclecast.prediction.base import (
    CycleDayClassification,
    CycleDayError,
    CyclePhase,
    PregnancyChance,
)

logger = logging.getLogger("cyclecast.prediction.classification")

# Upper bound (inclusive) of each phase, evaluated in order.
_PHASE_UPPER_BOUNDS: list[tuple[int, CyclePhase]] = [
    (5, CyclePhase.menstrual),
    (10, CyclePhase.follicular),
    (14, CyclePhase.ovulatory),
    (28, CyclePhase.luteal),
]

PHASE_DESCRIPTIONS: dict[CyclePhase, str] = {
    CyclePhase.menstrual: (
        "Your period is happening. You might experience cramps, fatigue, and mood "
        "changes. Focus on rest and self-care."
    ),
    CyclePhase.follicular: (
        "Energy levels start to rise with increasing estrogen. Good time for "
        "starting new projects and physical activity."
    ),
    CyclePhase.ovulatory: (
        "Peak fertility window. You might notice increased energy, better mood, "
        "and heightened sex drive."
    ),
    CyclePhase.luteal: (
        "Progesterone rises. You might experience PMS symptoms like bloating or "
        "mood changes. Focus on gentle exercise and comfort."
    ),
    CyclePhase.extended: (
        "Your cycle has gone longer than typical. Consider tracking any symptoms "
        "and consulting your healthcare provider if this persists."
    ),
}

PHASE_SYMPTOMS: dict[CyclePhase, str] = {
    CyclePhase.menstrual: (
        "Cramps, bloating, fatigue, headaches, mood swings, back pain, breast "
        "tenderness, and heavy or light bleeding."
    ),
    CyclePhase.follicular: (
        "Increased energy, improved mood, clearer skin, higher motivation, and "
        "generally feeling more positive and active."
    ),
    CyclePhase.ovulatory: (
        "Increased libido, mild pelvic pain, changes in cervical mucus, breast "
        "tenderness, and heightened energy levels."
    ),
    CyclePhase.luteal: (
        "PMS symptoms including bloating, mood changes, irritability, food "
        "cravings, breast tenderness, fatigue, and acne."
    ),
    CyclePhase.extended: (
        "Irregular symptoms may occur. You might experience fatigue, mood "
        "changes, or other cycle-related symptoms."
    ),
}

CHANCE_DESCRIPTIONS: dict[PregnancyChance, str] = {
    PregnancyChance.high: (
        "This is your fertile window when conception is most likely to occur. "
        "Ovulation typically happens during this time."
    ),
    PregnancyChance.medium: (
        "There is a moderate chance of conception during this time as you "
        "approach or move away from your fertile window."
    ),
    PregnancyChance.low: (
        "Conception is less likely during this time. This includes menstrual "
        "days and the later luteal phase of your cycle."
    ),
}


def cycle_phase(cycle_day: int) -> CyclePhase:
    for upper, phase in _PHASE_UPPER_BOUNDS:
        if cycle_day <= upper:
            return phase
    return CyclePhase.extended


def pregnancy_chance(cycle_day: int) -> PregnancyChance:
    if 11 <= cycle_day <= 17:
        return PregnancyChance.high
    if 8 <= cycle_day <= 10 or 18 <= cycle_day <= 20:
        return PregnancyChance.medium
    return PregnancyChance.low


def classify(cycle_day: int) -> CycleDayClassification:
    """Classify a cycle day into phase and pregnancy-chance tier.

    Args:
        cycle_day: 1-based day within the cycle.

    Returns:
        CycleDayClassification with the descriptive copy filled in.

    Raises:
        CycleDayError: If ``cycle_day`` is below 1, i.e. the day precedes the
                       cycle it was counted from.
    """
    if cycle_day < 1:
        raise CycleDayError(f"Cycle day must be >= 1, got {cycle_day}")

    phase = cycle_phase(cycle_day)
    chance = pregnancy_chance(cycle_day)
    logger.debug("Cycle day %d → %s / %s chance", cycle_day, phase.value, chance.value)
    return CycleDayClassification(
        cycle_day=cycle_day,
        phase=phase,
        description=PHASE_DESCRIPTIONS[phase],
        pregnancy_chance=chance,
        chance_description=CHANCE_DESCRIPTIONS[chance],
        symptoms=PHASE_SYMPTOMS[phase],
    )
