"""Application service that runs one outdated-actions scan."""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from gha_outdated.application.version_checker import VersionChecker
from gha_outdated.config import CheckerConfig
from gha_outdated.domain.action import ActionReference, VersionCheckResult
from gha_outdated.domain.workflow import extract_action_references
from gha_outdated.infrastructure.workflow_files import WorkflowLocator

logger = logging.getLogger(__name__)


class RunState(Enum):
    IDLE = "idle"
    DISCOVERING = "discovering"
    EXTRACTING = "extracting"
    CHECKING = "checking"
    REPORTING = "reporting"
    DONE = "done"


class RunOutcome(Enum):
    NO_FILES = "no_files"
    NO_REFERENCES = "no_references"
    UP_TO_DATE = "up_to_date"
    OUTDATED = "outdated"


@dataclass
class Run:
    """Everything a single invocation discovered and checked."""

    files: List[str] = field(default_factory=list)
    references: List[ActionReference] = field(default_factory=list)
    results: List[Optional[VersionCheckResult]] = field(default_factory=list)
    state: RunState = RunState.IDLE
    outcome: Optional[RunOutcome] = None

    @property
    def outdated(self) -> List[VersionCheckResult]:
        return [result for result in self.results if result is not None]

    def complete(self):
        """Mark the run as done once its report has been written."""
        self.state = RunState.DONE


class OutdatedActionsService:
    """Service for finding workflow action references and checking them for updates."""

    def __init__(
        self,
        locator: WorkflowLocator,
        version_checker: VersionChecker,
        config: CheckerConfig
    ):
        """
        Initialize outdated actions service.

        Args:
            locator: Workflow file locator
            version_checker: Checker used for every unique reference
            config: Run configuration
        """
        self.locator = locator
        self.version_checker = version_checker
        self.config = config

    def run(self) -> Run:
        """
        Discover, extract, check, and classify one run.

        Discovery and extraction short-circuit straight to reporting when
        they come up empty, so no request is made in that case.

        Returns:
            The classified run, in the REPORTING state
        """
        run = Run()

        run.state = RunState.DISCOVERING
        run.files = self.locator.find_workflow_files()
        if not run.files:
            logger.info("No workflow files found")
            return self._finish(run, RunOutcome.NO_FILES)

        run.state = RunState.EXTRACTING
        run.references = self.collect_references(run.files)
        if not run.references:
            logger.info(f"No action references found in {len(run.files)} workflow files")
            return self._finish(run, RunOutcome.NO_REFERENCES)

        run.state = RunState.CHECKING
        run.results = self.check_references(run.references)

        outcome = RunOutcome.OUTDATED if run.outdated else RunOutcome.UP_TO_DATE
        return self._finish(run, outcome)

    def collect_references(self, files: List[str]) -> List[ActionReference]:
        """
        Extract references from every file into one deduplicated list.

        Entries are keyed by the full raw token, or by `owner/repo` when
        versions are collapsed (first declaration wins). A file that cannot
        be read contributes nothing.
        """
        seen: Dict[str, ActionReference] = {}

        for path in files:
            workflow = self.locator.read(path)
            if workflow is None:
                continue

            for token in extract_action_references(workflow.content, strict=self.config.strict):
                try:
                    reference = ActionReference.parse(token)
                except ValueError as e:
                    logger.warning(f"Skipping reference in {path}: {e}")
                    continue

                key = reference.full_name if self.config.collapse_versions else reference.raw
                if key not in seen:
                    seen[key] = reference

        return list(seen.values())

    def check_references(self, references: List[ActionReference]) -> List[Optional[VersionCheckResult]]:
        """
        Check all references concurrently and wait for every one of them.

        Returns:
            One entry per reference, in the same order
        """
        max_workers = min(self.config.max_workers, len(references))
        logger.info(f"Checking {len(references)} references with {max_workers} workers")

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(executor.map(self.version_checker.check, references))

    @staticmethod
    def _finish(run: Run, outcome: RunOutcome) -> Run:
        run.state = RunState.REPORTING
        run.outcome = outcome
        logger.info(f"Run classified: {outcome.value} ({len(run.outdated)} outdated)")
        return run
