import logging
from pathlib import Path
from typing import List, Union

from pydantic import ValidationError

from models import TotpEntry, TotpExport
from services import qr_renderer, uri_encoder
from services.errors import (
    EntryExportError,
    InputIOError,
    OutputIOError,
    QrExportError,
    SchemaParseError,
)
from services.totp_builder import TotpBuilder
from utils import sanitize_filename

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class BatchService:
    @staticmethod
    def load_export(path: PathLike) -> TotpExport:
        """
        Read and parse the whole export document.
        Nothing is processed when any part of it is malformed.
        """
        try:
            data = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise InputIOError(path) from e

        try:
            return TotpExport.model_validate_json(data)
        except ValidationError as e:
            errors = [
                f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
                for err in e.errors()
            ]
            raise SchemaParseError(path, errors) from e

    @staticmethod
    def output_path(entry: TotpEntry, output_dir: PathLike) -> Path:
        filename = f"{sanitize_filename(entry.label_name)}-{sanitize_filename(entry.username)}.png"
        return Path(output_dir) / filename

    @staticmethod
    def export_entry(entry: TotpEntry, output_dir: PathLike, builder: TotpBuilder) -> Path:
        descriptor = builder.build(entry)
        uri = uri_encoder.encode(descriptor)
        png = qr_renderer.render(uri)

        # Same sanitized label and username overwrite the earlier file
        path = BatchService.output_path(entry, output_dir)
        try:
            path.write_bytes(png)
        except OSError as e:
            raise OutputIOError(path) from e
        return path

    @staticmethod
    def run(input_file: PathLike, output_dir: PathLike, allow_short_secrets: bool = True) -> List[Path]:
        export = BatchService.load_export(input_file)
        total = len(export.entries)

        logger.info("Export time: %s", export.export_time)
        logger.info("Total entries: %d", export.total_entries)
        logger.info("Actual entries: %d", total)
        if export.total_entries != total:
            logger.warning("total_entries (%d) does not match the number of entries (%d)",
                           export.total_entries, total)

        if not export.entries:
            logger.warning("No TOTP entries found")
            return []

        output_dir = Path(output_dir)
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputIOError(output_dir) from e

        builder = TotpBuilder(allow_short_secrets=allow_short_secrets)
        written = []
        for index, entry in enumerate(export.entries, start=1):
            logger.info("Processing %d/%d: %s (%s)", index, total, entry.label_name, entry.username)
            try:
                path = BatchService.export_entry(entry, output_dir, builder)
            except QrExportError as e:
                raise EntryExportError(index, total, entry.label_name, entry.username, e) from e
            logger.info("Written: %s", path)
            written.append(path)

        logger.info("All %d QR codes generated", len(written))
        return written
