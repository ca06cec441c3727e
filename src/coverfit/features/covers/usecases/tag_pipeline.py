# /*
# Where: features/covers/usecases/tag_pipeline.py
# What: Per-file orchestration: open tag, optional cover override, resize pictures, write back.
# Why: Keep each step a function over a single-owner tag handle so it can be tested alone.
# Assumptions:
# - The tag codec releases the file handle when its context manager exits.
# - Picture bytes are replaced in place; slot order and frame metadata are kept.
# Trade-offs:
# - With override enabled, pictures are removed before the override image is loaded.
#   A load failure abandons the file before write-back, so the file on disk is untouched.
# */

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from coverfit.features.covers.domain import (
    FileIOError,
    ImageTransformError,
    OverrideImageLoadError,
    ResizeConfig,
    TagFamilyMissingError,
)

from .image_transform import resize_image
from .override_resolver import load_override_image, resolve_override
from .ports import ImageResizer, TagCodecPort, TagHandle
from .process_logging import ProcessLogger, ensure_process_logger
from .processing_types import (
    FileStatus,
    OverrideResult,
    PictureResult,
    ProcessResult,
    ProcessingEvent,
)


@dataclass(frozen=True, slots=True)
class FileScope:
    """Position of a file inside a batch, attached to every log record."""

    path: Path
    sequence: int | None = None
    total: int | None = None
    source_root: Path | None = None

    def extra(self, **context: Any) -> dict[str, Any]:
        base: dict[str, Any] = {
            "sequence": self.sequence,
            "total_files": self.total,
            "source_path": self.path,
            "source_base_path": self.source_root,
        }
        base.update(context)
        return base


def _error_text(exc: BaseException) -> str:
    return str(exc) if str(exc) else type(exc).__name__


def apply_override(
    handle: TagHandle,
    config: ResizeConfig,
    log: ProcessLogger,
    scope: FileScope,
) -> OverrideResult:
    """Replace all pictures with the cover image stored next to the file.

    Raises:
        OverrideImageLoadError: The override file exists but cannot be loaded.
    """
    source = resolve_override(handle.path, config.override_file_name)
    if source is None:
        log(
            logging.INFO,
            ProcessingEvent.OVERRIDE_MISSING,
            "No override cover %s next to %s, keeping embedded pictures",
            config.override_file_name,
            handle.path,
            **scope.extra(),
        )
        return OverrideResult(applied=False)

    removed = handle.clear_pictures()
    image = load_override_image(source)
    handle.add_picture(image.data, image.mime)
    log(
        logging.INFO,
        ProcessingEvent.OVERRIDE_APPLIED,
        "Replaced %d picture(s) in %s with %s",
        removed,
        handle.path,
        source.path,
        **scope.extra(override_path=source.path, removed_pictures=removed),
    )
    return OverrideResult(applied=True, source_path=source.path, removed_pictures=removed)


def resize_pictures(
    handle: TagHandle,
    config: ResizeConfig,
    resizer: ImageResizer,
    log: ProcessLogger,
    scope: FileScope,
) -> list[PictureResult]:
    """Resize every picture of the tag independently, in slot order."""

    results: list[PictureResult] = []
    for index in range(handle.picture_count()):
        original = handle.read_picture(index)
        try:
            resized = resizer(original, config.width, config.height, config.quality)
        except ImageTransformError as exc:
            error_message = _error_text(exc)
            log(
                logging.ERROR,
                ProcessingEvent.PICTURE_ERROR,
                "Could not resize picture #%d in %s: %s",
                index + 1,
                handle.path,
                error_message,
                **scope.extra(picture_index=index, error_message=error_message),
            )
            results.append(
                PictureResult(
                    index=index,
                    success=False,
                    original_size=len(original),
                    error_message=error_message,
                )
            )
            continue

        handle.write_picture(index, resized)
        log(
            logging.DEBUG,
            ProcessingEvent.PICTURE_RESIZE,
            "Resized picture #%d in %s (%d -> %d bytes)",
            index + 1,
            handle.path,
            len(original),
            len(resized),
            **scope.extra(
                picture_index=index,
                original_size=len(original),
                resized_size=len(resized),
            ),
        )
        results.append(
            PictureResult(
                index=index,
                success=True,
                original_size=len(original),
                resized_size=len(resized),
            )
        )
    return results


def _transform_tag(
    handle: TagHandle,
    config: ResizeConfig,
    resizer: ImageResizer,
    log: ProcessLogger,
    scope: FileScope,
    result: ProcessResult,
    start: float,
) -> None:
    if not handle.has_id3v2:
        raise TagFamilyMissingError(handle.path)

    if config.override_from_file:
        result.override = apply_override(handle, config, log, scope)

    result.picture_results = resize_pictures(handle, config, resizer, log, scope)

    if not result.picture_results and not result.override_applied:
        result.status = FileStatus.NO_PICTURES
        log(
            logging.INFO,
            ProcessingEvent.FILE_SKIP_NO_PICTURES,
            "No embedded pictures in %s",
            handle.path,
            **scope.extra(),
        )
        return

    if not result.override_applied and not any(p.success for p in result.picture_results):
        result.status = FileStatus.FAILED
        result.error_message = "no picture could be resized"
        log(
            logging.ERROR,
            ProcessingEvent.FILE_ERROR,
            "Could not process file %s: %s",
            handle.path,
            result.error_message,
            **scope.extra(error_message=result.error_message),
        )
        return

    handle.save()
    result.written = True
    result.status = FileStatus.RESIZED
    log(
        logging.INFO,
        ProcessingEvent.FILE_SUCCESS,
        "Resized %d picture(s) in %s",
        sum(1 for p in result.picture_results if p.success),
        handle.path,
        **scope.extra(
            pictures=len(result.picture_results),
            duration_ms=(time.perf_counter() - start) * 1000,
        ),
    )


def process_file(
    path: Path,
    config: ResizeConfig,
    *,
    tag_codec: TagCodecPort,
    resizer: ImageResizer = resize_image,
    log: ProcessLogger | None = None,
    sequence: int | None = None,
    total: int | None = None,
    source_root: Path | None = None,
) -> ProcessResult:
    """Resize every embedded picture of one audio file.

    Failures are logged and reported through the returned result; nothing
    raised by the codecs escapes this function.
    """
    emit = ensure_process_logger(log)
    scope = FileScope(path=path, sequence=sequence, total=total, source_root=source_root)
    result = ProcessResult(source_path=path)
    start = time.perf_counter()

    try:
        with tag_codec.open(path) as handle:
            _transform_tag(handle, config, resizer, emit, scope, result, start)
    except TagFamilyMissingError:
        result.status = FileStatus.NO_TAG
        result.error_message = "no ID3v2 tag"
        emit(
            logging.ERROR,
            ProcessingEvent.FILE_SKIP_NO_TAG,
            "File %s does not have tags of ID3 version 2. No cover available.",
            path,
            **scope.extra(),
        )
    except OverrideImageLoadError as exc:
        result.status = FileStatus.FAILED
        result.written = False
        result.error_message = _error_text(exc)
        emit(
            logging.ERROR,
            ProcessingEvent.OVERRIDE_ERROR,
            "Could not process file %s: %s",
            path,
            result.error_message,
            **scope.extra(error_message=result.error_message),
        )
    except FileIOError as exc:
        result.status = FileStatus.FAILED
        result.written = False
        result.error_message = _error_text(exc)
        emit(
            logging.ERROR,
            ProcessingEvent.FILE_ERROR,
            "Could not process file %s: %s",
            path,
            result.error_message,
            **scope.extra(error_message=result.error_message),
        )
    except Exception as exc:
        result.status = FileStatus.FAILED
        result.written = False
        result.error_message = _error_text(exc)
        emit(
            logging.ERROR,
            ProcessingEvent.FILE_ERROR,
            "Unexpected error processing file %s: %s",
            path,
            result.error_message,
            **scope.extra(error_message=result.error_message),
        )

    return result


__all__ = ["FileScope", "apply_override", "process_file", "resize_pictures"]
