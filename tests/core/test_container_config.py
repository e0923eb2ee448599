from __future__ import annotations

import pytest

from talentmatch.container import create_container
from talentmatch.outreach import HTTPEmailWriter


def test_default_container_wires_four_factors():
    scorer = create_container().scorer()

    assert [factor.name for factor in scorer.factors] == [
        "Skills",
        "Experience",
        "Department",
        "Career Goals",
    ]
    assert [factor.weight for factor in scorer.factors] == [40, 25, 20, 15]


def test_create_container_with_overrides():
    container = create_container(
        settings={
            "parser": {"skill_vocabulary": ["Go", "Rust"], "description_fallback_chars": 20},
            "scoring": {
                "weights": {"skills": 50, "career_goals": 5},
                "rating_thresholds": {"Great": 70, "Fine": 30},
            },
            "outreach": {"llm_endpoint": "http://localhost:9999/write", "timeout": 2},
        }
    )

    parser = container.parser()
    scorer = container.scorer()
    drafter = container.drafter()

    assert parser._config.skill_vocabulary == ("Go", "Rust")
    assert parser._config.description_fallback_chars == 20
    assert [factor.weight for factor in scorer.factors] == [50, 25, 20, 5]
    assert scorer.rating_for(75) == "Great"
    assert scorer.rating_for(40) == "Fine"
    assert isinstance(drafter._writer, HTTPEmailWriter)
    assert drafter._writer._timeout == 2.0


def test_unknown_factor_weight_is_rejected():
    with pytest.raises(ValueError):
        create_container(settings={"scoring": {"weights": {"salary": 10}}})


def test_rating_thresholds_alone_reach_scorer():
    scorer = create_container(
        settings={"scoring": {"rating_thresholds": {"Great": 70}}}
    ).scorer()

    assert scorer.rating_for(71) == "Great"
    assert scorer.rating_for(69) == "Weak Match"
    assert [factor.weight for factor in scorer.factors] == [40, 25, 20, 15]
