"""Factories for the Cloud SDK clients."""

import logging
from typing import Optional

from google.cloud import storage

logger = logging.getLogger(__name__)

def create_storage_client(project: Optional[str] = None) -> storage.Client:
    """
    Creates a storage client using Application Default Credentials.

    Args:
        project: Project to bill and to create buckets in. When None, the
            project is inferred from the environment.
    """
    logger.debug(f"Creating storage client for project: {project or '<default>'}")
    return storage.Client(project=project)
