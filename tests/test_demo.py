# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for the walk-through trace."""

import logging

import pytest

from aviary import demo
from aviary._errors import ValidationError


class TestSections:
    def test_conformance(self, clean_settings):
        assert demo.conformance(clean_settings) == [
            "The Parrot flies at a top speed of 180.0 km/h.",
            "Is the Penguin a bird that flies? No!",
        ]

    def test_defaults(self, clean_settings):
        assert demo.defaults(clean_settings) == [
            "Does the Dove fly? Yes! At what top speed: 126.0 km/h.",
            "Is the Ostrich a bird that flies? No!",
        ]

    def test_overrides(self, clean_settings):
        assert demo.overrides(clean_settings) == [
            "African Swallow: flyable=True, can fly=True",
            "European Swallow: flyable=True, can fly=True",
            "Swallow: flyable=True, can fly=False",
        ]

    def test_descriptions(self, clean_settings):
        assert demo.descriptions(clean_settings) == [
            "Parrot: can fly",
            "Penguin: cannot fly",
            "African Swallow: can fly",
            "European Swallow: can fly",
            "Swallow: cannot fly",
            "Swift 5.0: can fly",
        ]

    def test_racing(self, clean_settings):
        assert demo.racing(clean_settings) == [
            "Top speed of the racers: 200.0 km/h",
            "Top speed of the lineup: 200.0 km/h",
            "Top speed among racers 2 to 4: 42.0 km/h",
        ]

    def test_boosting(self, clean_settings):
        assert demo.boosting(clean_settings) == [
            "Swift 5.0 speed = 5000.0 km/h",
            "Swift 5.0 speed = 5015.0 km/h",
            "Swift 5.0 speed = 5030.0 km/h",
        ]

    def test_boosting_follows_settings(self, clean_settings):
        config = clean_settings.model_copy(
            update={"AVIARY_BOOST_ROUNDS": 1, "AVIARY_BOOST_POWER": 10.0}
        )
        assert demo.boosting(config) == [
            "Swift 5.0 speed = 5000.0 km/h",
            "Swift 5.0 speed = 5050.0 km/h",
        ]


class TestRun:
    def test_runs_every_section_in_order(self, clean_settings):
        lines = demo.run(settings=clean_settings)
        expected = []
        for section in demo.SECTIONS.values():
            expected.extend(section(clean_settings))
        assert lines == expected

    def test_selected_sections(self, clean_settings):
        lines = demo.run(["boosting", "conformance"], clean_settings)
        assert lines[0] == "Swift 5.0 speed = 5000.0 km/h"
        assert lines[-1] == "Is the Penguin a bird that flies? No!"

    def test_unit(self, clean_settings):
        config = clean_settings.model_copy(
            update={"AVIARY_SPEED_UNIT": "mph"}
        )
        assert demo.run(["racing"], config)[0].endswith("200.0 mph")

    def test_unknown_section(self, clean_settings):
        with pytest.raises(ValidationError) as exc_info:
            demo.run(["flying-circus"], clean_settings)
        assert exc_info.value.details["value"] == "flying-circus"
        assert "racing" in exc_info.value.details["expected"]

    def test_unknown_section_runs_nothing(self, clean_settings, caplog):
        with caplog.at_level(logging.INFO, logger="aviary.demo"):
            with pytest.raises(ValidationError):
                demo.run(["racing", "flying-circus"], clean_settings)
        assert "Running section" not in caplog.text
