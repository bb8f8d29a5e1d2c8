"""YAML job files: load, validate and run batches of parity requests.

A job file lists enumerate and sample requests under ``jobs`` with an optional
master ``seed``. Loading validates the document against the packaged JSON
schema; running produces a JSON-serializable results dictionary.
"""

from __future__ import annotations

import json
from importlib import resources
from itertools import islice
from typing import Any, Dict, List

import jsonschema
import yaml

from paritybits.bitops import format_bits
from paritybits.config import PARITY_CONFIG
from paritybits.enumerate import all_with_parity, count_with_parity
from paritybits.logging import get_logger
from paritybits.sampler import random_with_parity
from paritybits.seed_manager import SeedManager
from paritybits.types import Parity

_logger = get_logger(__name__)

RECOGNIZED_KEYS = {"seed", "jobs"}


def _is_int(checker: Any, instance: Any) -> bool:
    return isinstance(instance, int) and not isinstance(instance, bool)


# Draft 7 counts 2.0 as an integer; widths, lengths and counts must be real ints
_JobValidator = jsonschema.validators.extend(
    jsonschema.Draft7Validator,
    type_checker=jsonschema.Draft7Validator.TYPE_CHECKER.redefine("integer", _is_int),
)


def _load_schema() -> Dict[str, Any]:
    try:
        with (
            resources.files("paritybits.schemas")
            .joinpath("jobs.json")
            .open("r", encoding="utf-8")
        ) as f:
            return json.load(f)
    except Exception as exc:  # pragma: no cover
        raise RuntimeError(
            "Failed to locate packaged job schema 'paritybits/schemas/jobs.json'."
        ) from exc


def load_jobs_yaml(yaml_str: str) -> Dict[str, Any]:
    """Load and validate a job file.

    Args:
        yaml_str: YAML document text.

    Returns:
        The validated job dictionary.

    Raises:
        ValueError: If the document is not a mapping, has unknown top-level
            keys, fails schema validation, or repeats a job name.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")

    extra = set(str(k) for k in data.keys()) - RECOGNIZED_KEYS
    if extra:
        raise ValueError(
            f"Unrecognized top-level key(s) in job file: {', '.join(sorted(extra))}. "
            f"Allowed keys are {sorted(RECOGNIZED_KEYS)}"
        )

    if "jobs" in data and not isinstance(data["jobs"], list):
        raise ValueError("'jobs' must be a list")

    try:
        jsonschema.validate(data, _load_schema(), cls=_JobValidator)
    except jsonschema.ValidationError as exc:
        location = "/".join(str(p) for p in exc.absolute_path) or "<root>"
        raise ValueError(f"Invalid job file at {location}: {exc.message}") from exc

    seen: set[str] = set()
    for job in data["jobs"]:
        if job["name"] in seen:
            raise ValueError(f"Duplicate job name '{job['name']}'")
        seen.add(job["name"])

    return data


def _run_enumerate(job: Dict[str, Any]) -> Dict[str, Any]:
    width = job["width"]
    parity = Parity.from_string(job["parity"])
    limit = job.get("limit")
    if limit is None:
        limit = PARITY_CONFIG.preview_limit

    patterns = list(islice(all_with_parity(width, parity), limit))
    return {
        "kind": "enumerate",
        "width": width,
        "parity": parity.name.lower(),
        "total": count_with_parity(width, parity),
        "patterns": patterns,
        "bits": [format_bits(p, width) for p in patterns],
    }


def _run_sample(job: Dict[str, Any], seed_mgr: SeedManager) -> Dict[str, Any]:
    bit_length = job["bit_length"]
    parity = Parity.from_string(job["parity"])
    count = PARITY_CONFIG.check_sample_count(job.get("count", 1))
    allow_zero = job.get("allow_zero", False)

    source = seed_mgr.create_random_state("sample", job["name"])
    patterns: List[int] = [
        random_with_parity(bit_length, parity, source, allow_zero=allow_zero)
        for _ in range(count)
    ]
    render_width = max([bit_length] + [p.bit_length() for p in patterns])
    return {
        "kind": "sample",
        "bit_length": bit_length,
        "parity": parity.name.lower(),
        "patterns": patterns,
        "bits": [format_bits(p, render_width) for p in patterns],
    }


def run_jobs(data: Dict[str, Any]) -> Dict[str, Any]:
    """Run every job in a validated job dictionary.

    Sample jobs draw from a random state derived from the master seed and the
    job name, so each job's output is independent of its position in the file.

    Returns:
        ``{"seed": <seed or None>, "jobs": {name: result}}``.
    """
    seed = data.get("seed")
    seed_mgr = SeedManager(seed)
    results: Dict[str, Any] = {}

    for job in data.get("jobs", []):
        name = job["name"]
        _logger.info(f"Running {job['kind']} job '{name}'")
        if job["kind"] == "enumerate":
            results[name] = _run_enumerate(job)
        else:
            results[name] = _run_sample(job, seed_mgr)
        _logger.debug(f"Job '{name}' produced {len(results[name]['patterns'])} patterns")

    return {"seed": seed, "jobs": results}
