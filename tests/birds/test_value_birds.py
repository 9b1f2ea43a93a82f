# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import pytest
from pydantic import ValidationError

from aviary.birds import Dove, Ostrich, Parrot, Penguin


class TestFlappingBirds:
    def test_parrot_speed(self, parrot):
        assert parrot.maximum_speed == 180.0

    def test_dove_speed(self, dove):
        assert dove.maximum_speed == 126.0

    def test_same_shape_different_types(self):
        parrot = Parrot(name="x", amplitude=1.0, frequency=2.0)
        dove = Dove(name="x", amplitude=1.0, frequency=2.0)
        assert parrot.maximum_speed == dove.maximum_speed
        assert type(parrot) is not type(dove)

    @pytest.mark.parametrize("cls", [Parrot, Dove])
    def test_rejects_negative_wing_values(self, cls):
        with pytest.raises(ValidationError):
            cls(name="bad", amplitude=-1.0, frequency=2.0)
        with pytest.raises(ValidationError):
            cls(name="bad", amplitude=1.0, frequency=-2.0)

    def test_frozen(self, parrot):
        with pytest.raises(ValidationError):
            parrot.amplitude = 100.0
        assert parrot.maximum_speed == 180.0


class TestFlightlessBirds:
    @pytest.mark.parametrize("cls", [Penguin, Ostrich])
    def test_has_no_speed(self, cls):
        bird = cls(name="walker")
        assert bird.name == "walker"
        assert not hasattr(bird, "maximum_speed")

    def test_value_equality(self):
        assert Penguin(name="Pingu") == Penguin(name="Pingu")
        assert Penguin(name="Pingu") != Penguin(name="Skipper")
