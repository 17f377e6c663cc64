"""Tests for generated option accessors and constructor seeding."""

import logging

import pytest

from chartdefaults import Component, ConfigurationError, install_defaults


def _chart_class(defaults):
    class Chart(Component):
        pass

    install_defaults(Chart, defaults)
    return Chart


class TestGetter:
    def test_returns_default(self):
        Chart = _chart_class({"width": 400, "height": 300})
        c = Chart()
        assert c.width() == 400
        assert c.height() == 300

    def test_class_level_default_field(self):
        Chart = _chart_class({"width": 400})
        assert Chart._width == 400

    def test_getter_has_no_side_effects(self):
        Chart = _chart_class({"width": 400})
        c = Chart()
        received = []
        c.on("change:width", received.append)
        c.width()
        assert received == []


class TestSetter:
    def test_set_then_get(self):
        Chart = _chart_class({"width": 400})
        c = Chart()
        c.width(500)
        assert c.width() == 500

    def test_returns_instance_for_chaining(self):
        Chart = _chart_class({"width": 400, "height": 300})
        c = Chart()
        assert c.width(1).height(2) is c
        assert (c.width(), c.height()) == (1, 2)

    def test_fires_change_once_with_value(self):
        Chart = _chart_class({"width": 400})
        c = Chart()
        received = []
        c.on("change:width", received.append)
        c.width(640)
        assert received == [640]

    def test_setting_none_is_a_write(self):
        Chart = _chart_class({"title": "x"})
        c = Chart()
        received = []
        c.on("change:title", received.append)
        assert c.title(None) is c
        assert c.title() is None
        assert received == [None]

    def test_instances_are_independent(self):
        Chart = _chart_class({"width": 400})
        a, b = Chart(), Chart()
        a.width(1)
        assert b.width() == 400
        assert Chart._width == 400

    def test_setting_same_value_still_fires(self):
        Chart = _chart_class({"width": 400})
        c = Chart()
        received = []
        c.on("change:width", received.append)
        c.width(400)
        assert received == [400]


class TestSeeding:
    def test_constructor_option_overrides_default(self):
        Chart = _chart_class({"width": 400, "height": 300})
        c = Chart({"width": 800})
        assert c.width() == 800
        assert c.height() == 300

    def test_kwargs_seed_too(self):
        Chart = _chart_class({"width": 400})
        assert Chart(width=10).width() == 10

    def test_falsy_values_are_seeded(self):
        Chart = _chart_class({"width": 0, "visible": True})
        c = Chart(width=5, visible=False)
        assert c.width() == 5
        assert c.visible() is False

    def test_undeclared_options_ignored(self):
        Chart = _chart_class({"width": 400})
        c = Chart(color="red")
        assert not hasattr(c, "_color")

    def test_seeded_before_user_initialize(self):
        seen = []

        class Chart(Component):
            def initialize(self, options):
                seen.append(self.width())

        install_defaults(Chart, {"width": 400})
        Chart(width=99)
        assert seen == [99]

    def test_seeding_is_silent(self):
        fired = []

        class Chart(Component):
            def trigger(self, event, *args):
                fired.append(event)
                super().trigger(event, *args)

        install_defaults(Chart, {"width": 400})
        Chart(width=800)
        assert fired == []


class TestDeclaration:
    def test_empty_defaults_leave_initialize_alone(self):
        class Chart(Component):
            def initialize(self, options):
                pass

        original = Chart.initialize
        install_defaults(Chart, {})
        install_defaults(Chart, None)
        assert Chart.initialize is original

    def test_redeclare_last_wins(self):
        Chart = _chart_class({"width": 400})
        install_defaults(Chart, {"width": 10})
        assert Chart().width() == 10
        assert Chart.__defaults__ == {"width": 10}

    def test_records_declared_defaults(self):
        Chart = _chart_class({"width": 400, "height": 300})
        assert Chart.__defaults__ == {"width": 400, "height": 300}
        assert Component.__defaults__ == {}

    def test_subclass_inherits_and_extends(self):
        Base = _chart_class({"width": 400})

        class Child(Base):
            pass

        install_defaults(Child, {"height": 300})
        c = Child(width=1, height=2)
        assert (c.width(), c.height()) == (1, 2)
        assert Child.__defaults__ == {"width": 400, "height": 300}
        assert Base.__defaults__ == {"width": 400}

    @pytest.mark.parametrize("name", ["not valid", "class", "", "1st"])
    def test_invalid_name(self, name):
        class Chart(Component):
            pass

        with pytest.raises(ConfigurationError):
            install_defaults(Chart, {name: 1})

    @pytest.mark.parametrize("name", ["on", "trigger", "initialize", "get"])
    def test_collision_with_existing_attribute(self, name):
        class Chart(Component):
            pass

        with pytest.raises(ConfigurationError, match=name):
            install_defaults(Chart, {name: 1})

    @pytest.mark.parametrize("name", ["subscribers", "accessor"])
    def test_collision_with_existing_field(self, name):
        class Chart(Component):
            pass

        with pytest.raises(ConfigurationError, match="_" + name):
            install_defaults(Chart, {name: 3})

        c = Chart()
        received = []
        c.on("ping", received.append)
        c.trigger("ping", 1)
        assert received == [1]

    def test_user_field_collision(self):
        class Chart(Component):
            _width = "mine"

        with pytest.raises(ConfigurationError, match="_width"):
            install_defaults(Chart, {"width": 400})

    def test_inherited_option_may_be_redeclared(self):
        Base = _chart_class({"width": 400})

        class Child(Base):
            pass

        install_defaults(Child, {"width": 10})
        assert Child().width() == 10
        assert Base().width() == 400

    def test_reserved_field(self):
        class Chart(Component):
            pass

        with pytest.raises(ConfigurationError, match="reserved"):
            install_defaults(Chart, {"listeners": 1})

    def test_no_rollback_on_failure(self, caplog):
        class Chart(Component):
            pass

        with caplog.at_level(logging.ERROR, logger="chartdefaults.accessors"):
            with pytest.raises(ConfigurationError):
                install_defaults(Chart, {"width": 1, "on": 2})

        assert Chart._width == 1
        assert callable(Chart.width)
        assert "'on'" in caplog.text


class TestGetSet:
    def test_get_and_set_by_name(self):
        Chart = _chart_class({"width": 400})
        c = Chart()
        received = []
        c.on("change:width", received.append)
        assert c.set("width", 5) is c
        assert c.get("width") == 5
        assert received == [5]

    def test_unknown_name(self):
        Chart = _chart_class({"width": 400})
        with pytest.raises(KeyError):
            Chart().get("height")
        with pytest.raises(KeyError):
            Chart().set("height", 1)
