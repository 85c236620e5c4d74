"""Unit tests for desired-state models."""

import pytest
from condastate.models.desired import DesiredState, Ensure, EnsureKind


class TestEnsure:
    """Tests for the Ensure tagged value."""

    @pytest.mark.parametrize(
        ("text", "kind"),
        [
            ("present", EnsureKind.PRESENT),
            ("installed", EnsureKind.PRESENT),
            ("absent", EnsureKind.ABSENT),
            ("latest", EnsureKind.LATEST),
            ("LATEST", EnsureKind.LATEST),
        ],
    )
    def test_parse_keywords(self, text: str, kind: EnsureKind) -> None:
        """Keywords map to their kind without a version."""
        ensure = Ensure.parse(text)

        assert ensure.kind == kind
        assert ensure.version is None

    def test_parse_version(self) -> None:
        """Anything else is an exact version."""
        ensure = Ensure.parse(" 1.26.4 ")

        assert ensure.kind == EnsureKind.VERSION
        assert ensure.version == "1.26.4"
        assert ensure.is_version is True

    def test_parse_blank_rejected(self) -> None:
        """A blank state is an error."""
        with pytest.raises(ValueError, match="empty"):
            Ensure.parse("  ")

    def test_version_kind_requires_version(self) -> None:
        """VERSION without a version is invalid."""
        with pytest.raises(ValueError, match="version is required"):
            Ensure(EnsureKind.VERSION)

    def test_keyword_kind_rejects_version(self) -> None:
        """Keyword kinds do not carry versions."""
        with pytest.raises(ValueError, match="does not take a version"):
            Ensure(EnsureKind.LATEST, "1.0")

    def test_str(self) -> None:
        """str() gives the keyword or the version."""
        assert str(Ensure.latest()) == "latest"
        assert str(Ensure.exact("2.0")) == "2.0"


class TestDesiredState:
    """Tests for DesiredState."""

    def test_defaults_to_present(self) -> None:
        """Default desired state is PRESENT without a channel."""
        state = DesiredState("numpy")

        assert state.ensure.kind == EnsureKind.PRESENT
        assert state.channel is None

    def test_target(self) -> None:
        """The name is resolved into a target."""
        state = DesiredState("ml::numpy")

        assert state.target.environment == "ml"
        assert state.target.package == "numpy"

    @pytest.mark.parametrize("source", ["", "   ", None])
    def test_blank_source_is_no_channel(self, source: str | None) -> None:
        """Blank sources do not produce a channel override."""
        assert DesiredState("numpy", source=source).channel is None

    def test_channel(self) -> None:
        """A source becomes the channel."""
        assert DesiredState("numpy", source="conda-forge").channel == "conda-forge"
