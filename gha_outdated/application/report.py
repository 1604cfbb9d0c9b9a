"""Human-readable report and exit status for a finished run."""

from typing import List

from gha_outdated.application.outdated_service import Run, RunOutcome
from gha_outdated.config import CheckerConfig


def render_report(run: Run, config: CheckerConfig) -> List[str]:
    """
    Render the progress lines and the result summary of a run.

    Args:
        run: Completed run
        config: Run configuration

    Returns:
        Output lines, without trailing newlines
    """
    lines = ["Checking for outdated GitHub Actions..."]
    if config.major_only:
        lines.append("Mode: Major version updates only")

    if run.outcome is RunOutcome.NO_FILES:
        searched = " or ".join(config.workflow_dirs)
        lines.append(f"No workflow files found in {searched}.")
        return lines

    lines.append(f"Found {len(run.files)} workflow files.")
    lines.append(f"Found {len(run.references)} unique GitHub Actions.")
    lines.append("")

    if run.outcome is RunOutcome.NO_REFERENCES:
        lines.append("No GitHub Actions found in workflow files.")
        return lines

    outdated = run.outdated
    if not outdated:
        if config.major_only:
            lines.append("✅ No major version updates found for GitHub Actions!")
        else:
            lines.append("✅ All GitHub Actions are up to date!")
        return lines

    lines.append("📢 Outdated Actions:")
    lines.append("-----------------")
    for result in outdated:
        label = "⚠️  MAJOR UPDATE" if result.is_major_update else "Update available"
        lines.append(f"{result.action} ({label})")
        lines.append(f"Current: {result.current_version} → Latest: {result.latest_version}")
        lines.append("")

    return lines


def exit_code(run: Run) -> int:
    """Return 1 when the run found outdated actions, 0 otherwise."""
    return 1 if run.outcome is RunOutcome.OUTDATED else 0
