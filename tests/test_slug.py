import pytest

from dev_notes.slug import slugify


@pytest.mark.parametrize(
    "title,expected",
    [
        ("Project Ideas", "project-ideas"),
        ("Test Note", "test-note"),
        ("API Design Ideas", "api-design-ideas"),
        ("  Leading and trailing  ", "leading-and-trailing"),
        ("Tabs\tand\nnewlines", "tabs-and-newlines"),
        ("What's new? (v2)", "whats-new-v2"),
        ("a - b -- c", "a-b-c"),
        ("--dashes--", "dashes"),
        ("snake_case_title", "snake_case_title"),
        ("", ""),
        ("!!!", ""),
        ("Café Notes", "caf-notes"),
        ("Привіт світ", ""),
        ("naïve\u00a0résumé", "nave-rsum"),
    ],
)
def test_slugify(title, expected):
    assert slugify(title) == expected


@pytest.mark.parametrize(
    "title", ["Project Ideas", "  Mixed CASE -- title!! ", "x", "?? ok ??", "Café Notes"]
)
def test_slugify_is_idempotent(title):
    once = slugify(title)
    assert slugify(once) == once


def test_titles_differing_in_case_and_punctuation_collide():
    assert slugify("API: Ideas!") == slugify("api ideas")
