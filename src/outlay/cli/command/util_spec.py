from __future__ import annotations

"""
Tests for console theme switching.
"""

import pytest
from rich.style import Style
from rich.theme import ThemeStackError

from outlay.services.theme_service import Theme

from .util import apply_theme, console, reset_theme


@pytest.fixture(autouse=True)
def base_palette():
    reset_theme()
    yield
    reset_theme()


class DescribeApplyTheme:
    def it_should_switch_console_styles(self):
        apply_theme(Theme.dark)

        assert console.get_style("amount") == Style.parse("bold #ff6b6b")

    def it_should_use_the_last_applied_theme(self):
        apply_theme(Theme.dark)
        apply_theme(Theme.light)

        assert console.get_style("amount") == Style.parse("bold #c0392b")

    def it_should_keep_a_single_pushed_theme_across_repeated_switches(self):
        for theme in (Theme.dark, Theme.light, Theme.dark, Theme.dark):
            apply_theme(theme)

        reset_theme()

        assert console.get_style("amount") == Style.parse("bold #c0392b")
        with pytest.raises(ThemeStackError):
            console.pop_theme()


class DescribeResetTheme:
    def it_should_be_a_no_op_without_a_switch(self):
        reset_theme()

        assert console.get_style("amount") == Style.parse("bold #c0392b")
