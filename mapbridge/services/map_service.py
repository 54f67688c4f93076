import logging

from mapbridge.errors import BadInput, MarkersNotFound, ReadError, WriteError
from mapbridge.repos.script_repo import read_script, script_lock, write_script
from mapbridge.schemas.map import validate_update_map
from mapbridge.services.patcher import DEFAULT_MARKERS, patch

log = logging.getLogger(__name__)


def update_map(path, payload: str, markers=DEFAULT_MARKERS) -> str:
    """Splice ``payload`` into the stage1 region of the script at ``path``.

    Read and marker failures never reach the write step. Returns the new text.
    """
    with script_lock(path):
        try:
            current = read_script(path)
        except ReadError as exc:
            log.error("Failed to read GameManager.lua: %s", exc)
            raise
        try:
            updated = patch(current, payload, markers)
        except MarkersNotFound as exc:
            log.error("Tags not found in GameManager.lua (%s)", exc)
            raise
        try:
            write_script(path, updated)
        except WriteError as exc:
            log.error("Failed to update GameManager.lua: %s", exc)
            raise
    log.info("Map data written successfully.")
    return updated


def update_from_body(data, path, markers=DEFAULT_MARKERS) -> str:
    try:
        map_data = validate_update_map(data)
    except ValueError as e:
        raise BadInput(str(e))
    return update_map(path, map_data, markers)
