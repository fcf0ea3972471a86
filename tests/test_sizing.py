import pytest

from girder_rebar.core.sizing import suggest_section


class TestSuggestSection:

    def test_typical_span(self):
        """L/15 = 800, h/2 = 400."""
        assert suggest_section(12000) == (400, 800)

    def test_rounds_half_up(self):
        """L/15 = 825 -> 850, 850/2 = 425 -> 450."""
        assert suggest_section(12375) == (450, 850)

    def test_minimums(self):
        assert suggest_section(3000) == (200, 400)

    @pytest.mark.parametrize("span", [0, -100])
    def test_non_positive_span(self, span):
        with pytest.raises(ValueError):
            suggest_section(span)
