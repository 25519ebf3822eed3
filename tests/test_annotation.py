import pytest

from chess_adjudication.annotation import parse_annotation
from chess_adjudication.domain.errors import AnnotationError
from chess_adjudication.domain.game import MoveData
from chess_adjudication.domain.result import Err, Ok


class TestParseAnnotation:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("-1.91/13 0.031s", MoveData(eval=-191, time=31)),
            ("+0.18/15 0.45s", MoveData(eval=18, time=450)),
            ("+M17/21 0.020s", MoveData(eval=10000, time=20)),
            ("-M26/18 0.022s", MoveData(eval=-10000, time=22)),
        ],
    )
    def test_known_comments(self, text: str, expected: MoveData) -> None:
        assert parse_annotation(text) == Ok(expected)

    def test_sign_defaults_to_positive(self) -> None:
        assert parse_annotation("2.50/9 1.5s") == Ok(MoveData(eval=250, time=1500))

    def test_mate_without_sign(self) -> None:
        assert parse_annotation("M3/30 0.1s") == Ok(MoveData(eval=10000, time=100))

    def test_single_fraction_digit_scales_to_hundreds(self) -> None:
        assert parse_annotation("+0.00/1 0.2s") == Ok(MoveData(eval=0, time=200))

    def test_whole_seconds(self) -> None:
        assert parse_annotation("-12.34/20 3s") == Ok(MoveData(eval=-1234, time=3000))

    def test_trailing_text_ignored(self) -> None:
        assert parse_annotation("+0.18/15 0.45s, White wins") == Ok(MoveData(eval=18, time=450))

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "book",
            "+0.1815 0.45s",  # missing slash
            "+0.18/15 0.45",  # missing trailing s
            "+0.1/15 0.45s",  # one eval decimal
            "+0.180/15 0.45s",  # three eval decimals
            "+18/15 0.45s",  # no eval decimals
            "+0.18/15 0.4567s",  # four time decimals
            "+0.18/15  0.45s",  # two whitespace characters
            " +0.18/15 0.45s",  # not anchored at the start
            "+M/15 0.45s",  # mate marker without distance
            "++0.18/15 0.45s",
            "+0.18/ 0.45s",
            "+0.18/15 .45s",
        ],
    )
    def test_grammar_violations_fail(self, text: str) -> None:
        result = parse_annotation(text)
        assert isinstance(result, Err)
        assert isinstance(result.error, AnnotationError)
        assert result.error.text == text

    def test_deterministic(self) -> None:
        assert parse_annotation("-1.91/13 0.031s") == parse_annotation("-1.91/13 0.031s")
