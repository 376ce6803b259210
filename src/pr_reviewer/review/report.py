from pr_reviewer.models.review import ReviewReport


NO_DESCRIPTION = "No description provided"
BANNER_TITLE = " DECISION "
BANNER_WIDTH = 30


def format_report(report: ReviewReport) -> str:
    """Render the final report shown to the user."""
    pr = report.pull_request
    review = report.review
    banner = BANNER_TITLE.center(BANNER_WIDTH, "=")

    lines = [
        f"Reviewing PR #{pr.id}: {pr.title}",
        "",
        f"Author: {pr.author_display_name}",
        f"Description: {pr.description or NO_DESCRIPTION}",
        "",
        "AI Review Results:",
        "",
        review.review_text,
        "",
        banner,
        f"Decision: {review.decision.value}",
        f"Reason: {review.reason}",
        "=" * BANNER_WIDTH,
    ]
    return "\n".join(lines)
