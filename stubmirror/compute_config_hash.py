"""Logic for computing stable hashes of the settings document."""

import hashlib
import json

from stubmirror.init_file import InitFile


def compute_config_hash(config: InitFile) -> str:
    """Compute a stable hash of the configuration.

    Uses canonical JSON serialization (sorted keys).
    """
    config_json = json.dumps(config.to_dict(), sort_keys=True, ensure_ascii=True)
    return hashlib.sha256(config_json.encode("utf-8")).hexdigest()
