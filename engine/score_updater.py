"""Next-round score feedback from this round's outcome."""

import copy
from typing import Dict, List

from models.application import Application
from models.customer import Customer
from models.lottery import Assignment, ScoreUpdate
from config.defaults import LOSE_SCORE_DELTA, MAX_SCORE, MIN_SCORE, QUALITY_SCORE_DELTA


def clamp_score(score: float) -> float:
    return max(MIN_SCORE, min(MAX_SCORE, score))


def _update(app: Application, next_score: float, seat_quality: str, last_result: str) -> ScoreUpdate:
    return ScoreUpdate(
        application_id=app.application_id,
        current_score=app.past_score,
        next_score=next_score,
        change=next_score - app.past_score,
        seat_quality=seat_quality,
        last_result=last_result,
    )


def calculate_score_updates(
    assignments: List[Assignment],
    unassigned: List[str],
    applications: List[Application],
) -> List[ScoreUpdate]:
    """One ScoreUpdate per applicant that appeared in the run.

    Better seats push the score down and worse seats push it up; a loss adds
    more than any seat quality can take away. Priority applicants keep their
    score whatever happens.
    """
    app_map: Dict[str, Application] = {a.application_id: a for a in applications}
    updates: List[ScoreUpdate] = []

    for assignment in assignments:
        app = app_map.get(assignment.application_id)
        if app is None:
            continue
        quality = assignment.seat_quality or "normal"
        if app.is_priority:
            updates.append(_update(app, app.past_score, quality, "win"))
            continue
        next_score = clamp_score(app.past_score + QUALITY_SCORE_DELTA[quality])
        updates.append(_update(app, next_score, quality, "win"))

    for application_id in unassigned:
        app = app_map.get(application_id)
        if app is None:
            continue
        if app.is_priority:
            updates.append(_update(app, app.past_score, "lose", "lose"))
            continue
        next_score = clamp_score(app.past_score + LOSE_SCORE_DELTA)
        updates.append(_update(app, next_score, "lose", "lose"))

    return updates


def apply_score_updates(
    customers: List[Customer],
    updates: List[ScoreUpdate],
) -> List[Customer]:
    """Return customer copies carrying next-round scores and last results."""
    update_map = {u.application_id: u for u in updates}
    result = []
    for customer in customers:
        c = copy.deepcopy(customer)
        update = update_map.get(c.customer_id)
        if update:
            c.total_score = update.next_score
            c.last_result = update.last_result
        result.append(c)
    return result
