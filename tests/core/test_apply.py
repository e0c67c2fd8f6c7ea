"""Tests for applying suggestions to the filter list."""

from filterbar.core.apply import apply_suggestion_to_filters
from filterbar.core.matching import match_filters
from filterbar.core.suggestions import Suggestion, get_suggestions
from filterbar.models import (
    DraftFilter,
    FinishedFilter,
    LiteralUnit,
    NumberUnit,
    OptionSetUnit,
)


class TestApplySuggestion:
    """Tests for apply_suggestion_to_filters."""

    def test_completes_initial_single_part(self, make_definition):
        f = make_definition(LiteralUnit(text="status"), OptionSetUnit(options=["=404"]))

        result = apply_suggestion_to_filters(
            [DraftFilter("sta")],
            Suggestion(index=0, value="status", show_as="STATUS", definition=f, kind="partial"),
        )

        assert len(result) == 1
        assert result[0].text == "status"

    def test_completes_second_part(self, make_definition):
        f = make_definition(
            LiteralUnit(text="status"), OptionSetUnit(options=["=", "!="]), NumberUnit()
        )

        result = apply_suggestion_to_filters(
            [DraftFilter("status!")],
            Suggestion(index=6, value="!=", show_as="!=", definition=f, kind="partial"),
        )

        assert len(result) == 1
        assert result[0].text == "status!="

    def test_template_is_noop(self, make_definition):
        f = make_definition(LiteralUnit(text="status="), NumberUnit())
        filters = [DraftFilter("status=")]

        result = apply_suggestion_to_filters(
            filters,
            Suggestion(
                index=7, value="", show_as="{number}", definition=f, kind="partial", template=True
            ),
        )

        assert result == [DraftFilter("status=")]
        assert result[0].text == "status="

    def test_full_suggestion_creates_filter(self, make_definition):
        f = make_definition(
            LiteralUnit(text="status"), OptionSetUnit(options=["=", "!="]), NumberUnit()
        )

        result = apply_suggestion_to_filters(
            [DraftFilter("status!=40")],
            Suggestion(index=8, value="404", show_as="404", definition=f, kind="full"),
        )

        assert result == [DraftFilter(""), FinishedFilter(definition=f, built_from="status!=404")]

    def test_full_suggestion_keeps_existing_filters(self, status_definition, body_size_definition):
        existing = body_size_definition.build("bodySize>=10")
        filters = [DraftFilter("status=5"), existing]

        result = apply_suggestion_to_filters(
            filters,
            Suggestion(index=7, value="500", show_as="500", definition=status_definition, kind="full"),
        )

        assert len(result) == len(filters) + 1
        assert result[0].text == ""
        assert result[1] is existing
        assert result[2].built_from == "status=500"

    def test_uses_definition_factory(self, make_definition):
        f = make_definition(LiteralUnit(text="port="), NumberUnit(), factory=lambda t: ("port", t))

        result = apply_suggestion_to_filters(
            [DraftFilter("port=8")],
            Suggestion(index=5, value="8080", show_as="8080", definition=f, kind="full"),
        )

        assert result[1] == ("port", "port=8080")

    def test_round_trip_through_suggestions(self, status_definition):
        """Typing, picking suggestions, and finishing a filter."""
        definitions = [status_definition]
        filters = match_filters(definitions, "sta")

        first = get_suggestions(definitions, filters[0].text)
        assert [s.value for s in first] == ["status=", "status!="]

        filters = apply_suggestion_to_filters(filters, first[1])
        assert filters[0].text == "status!="

        template = get_suggestions(definitions, filters[0].text)
        assert template[0].template
        assert apply_suggestion_to_filters(filters, template[0]) == filters

        filters[0].text = "status!=404"
        final = get_suggestions(definitions, filters[0].text)
        filters = apply_suggestion_to_filters(filters, final[0])

        assert filters[0] == DraftFilter("")
        assert filters[1].values == ("status", "!=", 404)
