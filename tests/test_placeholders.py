"""Tests for ${name} placeholder substitution."""

from verbump.models import Intent, VersionFact, VersionFacts
from verbump.services.placeholders import Placeholder, render_intent, substitute, version_bindings

FACTS = VersionFacts(
    base=VersionFact(branch="main", version="2.2.0"),
    head=VersionFact(branch="release/2.3", version="2.3.0-beta.1", is_prerelease=True),
)


def test_substitute_example() -> None:
    bindings = {"head-version": "2.3.0-beta.1", "head-branch": "release/2.3"}
    assert substitute("v${head-version} from ${head-branch}", bindings) == "v2.3.0-beta.1 from release/2.3"


def test_substitute_replaces_all_occurrences() -> None:
    assert substitute("${head-version}/${head-version}", {"head-version": "1.0.0"}) == "1.0.0/1.0.0"


def test_substitute_without_tokens_is_identity() -> None:
    text = "Release $5 {braces} $head-version"
    assert substitute(text, version_bindings(FACTS)) == text
    assert substitute(substitute(text, {}), {}) == text


def test_unbound_token_left_as_is() -> None:
    assert substitute("${unknown} ${head-branch}", {"head-branch": "dev"}) == "${unknown} dev"


def test_substitution_is_not_recursive() -> None:
    """A bound value that looks like a token is inserted literally."""
    bindings = {"head-branch": "${base-branch}", "base-branch": "main"}
    assert substitute("${head-branch}", bindings) == "${base-branch}"


def test_version_bindings_cover_every_placeholder() -> None:
    bindings = version_bindings(FACTS)
    assert set(bindings) == {p.value for p in Placeholder}
    assert bindings["is-prerelease"] == "true"
    assert bindings["base-version"] == "2.2.0"


def test_render_intent_only_touches_title_and_description() -> None:
    intent = Intent(
        title="Release v${head-version}",
        description="${base-branch} <- ${head-branch} (prerelease: ${is-prerelease})",
        labels=("${head-version}",),
    )

    rendered = render_intent(intent, version_bindings(FACTS))

    assert rendered.title == "Release v2.3.0-beta.1"
    assert rendered.description == "main <- release/2.3 (prerelease: true)"
    assert rendered.labels == ("${head-version}",)
