from collections.abc import Sequence
from pr_reviewer.models.review import FileDiff


FILE_BLOCK = """### File: {filename}
```diff
{patch}
```"""


def build_review_prompt(file_diffs: Sequence[FileDiff]) -> str:
    """Render every file diff as a labeled diff block, in the given order."""
    return "\n\n".join(
        FILE_BLOCK.format(filename=file_diff.filename, patch=file_diff.patch)
        for file_diff in file_diffs
    )
