import pytest
from pr_reviewer.models.review import FileDiff
from pr_reviewer.review.prompts import build_review_prompt


FILES = [
    FileDiff(filename="src/b.py", patch="diff --git a/src/b.py b/src/b.py\n+b = 2"),
    FileDiff(filename="src/a.py", patch="diff --git a/src/a.py b/src/a.py\n-a = 1\n a2 = 3"),
]


def test_build_prompt_labels_and_fences_each_file():
    prompt = build_review_prompt(FILES)

    assert "### File: src/b.py\n```diff\ndiff --git a/src/b.py b/src/b.py\n+b = 2\n```" in prompt
    assert "### File: src/a.py\n```diff\n" in prompt


def test_build_prompt_keeps_input_order():
    prompt = build_review_prompt(FILES)

    assert prompt.index("src/b.py") < prompt.index("src/a.py")


def test_build_prompt_blocks_separated_by_blank_line():
    prompt = build_review_prompt(FILES)

    assert "+b = 2\n```\n\n### File: src/a.py" in prompt


def test_build_prompt_preserves_patch_text():
    prompt = build_review_prompt(FILES)

    assert "\n-a = 1\n a2 = 3\n" in prompt


def test_build_prompt_is_deterministic():
    copies = [FileDiff(**f.model_dump()) for f in FILES]

    assert build_review_prompt(FILES) == build_review_prompt(copies)


def test_build_prompt_no_dedup():
    prompt = build_review_prompt([FILES[0], FILES[0]])

    assert prompt.count("### File: src/b.py") == 2


def test_build_prompt_empty():
    assert build_review_prompt([]) == ""
