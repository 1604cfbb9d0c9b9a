"""Discovery and reading of workflow definition files."""

import logging
import os
from typing import List, Optional

from gha_outdated.config import CheckerConfig
from gha_outdated.domain.workflow import WorkflowFile

logger = logging.getLogger(__name__)


class WorkflowLocator:
    """Finds workflow files under the configured workflow directories."""

    def __init__(self, config: CheckerConfig):
        """
        Initialize workflow locator.

        Args:
            config: Run configuration (base directory, folders, suffixes)
        """
        self.config = config

    def find_workflow_files(self) -> List[str]:
        """
        List workflow files directly inside each workflow directory.

        Missing directories are skipped. Files are returned per directory in
        configured order, sorted by name within a directory.

        Returns:
            Paths of matching files, empty if there are none
        """
        workflow_files = []

        for workflow_dir in self.config.workflow_dirs:
            directory = os.path.join(self.config.base_dir, workflow_dir)
            if not os.path.isdir(directory):
                logger.debug(f"Skipping missing workflow directory: {directory}")
                continue

            for name in sorted(os.listdir(directory)):
                path = os.path.join(directory, name)
                if name.endswith(self.config.extensions) and os.path.isfile(path):
                    workflow_files.append(path)

        logger.debug(f"Located {len(workflow_files)} workflow files")
        return workflow_files

    def read(self, path: str) -> Optional[WorkflowFile]:
        """
        Read a workflow file.

        Returns:
            The file, or None if it could not be read
        """
        try:
            with open(path, "r", encoding="utf-8", errors="replace") as f:
                return WorkflowFile(path=path, content=f.read())
        except OSError as e:
            logger.error(f"Error reading {path}: {e}")
            return None
