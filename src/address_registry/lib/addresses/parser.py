"""CSV parser for pre-split address files with chunked reading.

Supports comma, pipe, and tab delimiters and UTF-8/GBK encoding.  Rows are
yielded as :class:`AddressRecord` batches; tokenization is expected to have
happened upstream, so every field is taken as-is.
"""

from collections.abc import Iterator
from pathlib import Path

import pandas as pd
from loguru import logger

from address_registry.lib.addresses.types import AddressRecord

# Expected header → record field name (snake_case and legacy camelCase headers)
ADDRESS_COLUMN_MAP: dict[str, str] = {
    "raw_text": "raw_text",
    "rawText": "raw_text",
    "text": "text",
    "village": "village",
    "road": "road",
    "road_num": "road_num",
    "roadNum": "road_num",
    "building_num": "building_num",
    "buildingNum": "building_num",
    "province_id": "province_id",
    "provinceId": "province_id",
    "city_id": "city_id",
    "cityId": "city_id",
    "county_id": "county_id",
    "countyId": "county_id",
}

_REGION_ID_FIELDS = ("province_id", "city_id", "county_id")

_ENCODINGS = ("utf-8-sig", "gbk")


def detect_encoding(file_path: Path) -> str:
    """Detect file encoding by attempting to read with common encodings.

    Args:
        file_path: Path to the CSV file.

    Returns:
        The detected encoding string.

    Raises:
        ValueError: If encoding cannot be detected.
    """
    for encoding in _ENCODINGS:
        try:
            with file_path.open("r", encoding=encoding) as f:
                f.read(8192)
            return encoding
        except UnicodeDecodeError:
            continue
    msg = f"Cannot detect encoding for {file_path}"
    raise ValueError(msg)


def detect_delimiter(file_path: Path, encoding: str) -> str:
    """Detect the CSV delimiter from the header line.

    Raises:
        ValueError: If the delimiter cannot be detected.
    """
    with file_path.open("r", encoding=encoding) as f:
        first_line = f.readline()

    counts = {
        ",": first_line.count(","),
        "|": first_line.count("|"),
        "\t": first_line.count("\t"),
    }
    delimiter = max(counts, key=counts.get)  # type: ignore[arg-type]
    if counts[delimiter] == 0:
        msg = f"Cannot detect delimiter in {file_path}"
        raise ValueError(msg)

    logger.debug(f"Detected delimiter: {delimiter!r} for {file_path}")
    return delimiter


def _to_record(row: dict[str, str]) -> AddressRecord:
    region_ids = {}
    for name in _REGION_ID_FIELDS:
        value = row.get(name, "").strip()
        region_ids[name] = int(value) if value else 0
    return AddressRecord(
        raw_text=row["raw_text"],
        text=row.get("text", ""),
        village=row.get("village", ""),
        road=row.get("road", ""),
        road_num=row.get("road_num", ""),
        building_num=row.get("building_num", ""),
        **region_ids,
    )


def parse_address_chunks(
    file_path: Path,
    batch_size: int = 1000,
) -> Iterator[list[AddressRecord]]:
    """Parse an address CSV file in chunks.

    Args:
        file_path: Path to the CSV file.
        batch_size: Number of rows per chunk.

    Yields:
        Lists of AddressRecord in file order.

    Raises:
        ValueError: If the file cannot be parsed or lacks a raw text column.
    """
    encoding = detect_encoding(file_path)
    delimiter = detect_delimiter(file_path, encoding)

    logger.info(f"Parsing {file_path} with delimiter={delimiter!r}, encoding={encoding}, batch_size={batch_size}")

    reader = pd.read_csv(
        file_path,
        sep=delimiter,
        encoding=encoding,
        chunksize=batch_size,
        dtype=str,
        keep_default_na=False,
    )

    rename_map: dict[str, str] | None = None

    for chunk in reader:
        chunk.columns = chunk.columns.str.strip()

        if rename_map is None:
            rename_map = {c: ADDRESS_COLUMN_MAP[c] for c in chunk.columns if c in ADDRESS_COLUMN_MAP}
            for csv_col in chunk.columns:
                if csv_col not in ADDRESS_COLUMN_MAP:
                    logger.debug(f"Ignoring unknown CSV column: {csv_col!r}")
            if "raw_text" not in rename_map.values():
                msg = f"{file_path} has no raw_text column"
                raise ValueError(msg)

        chunk = chunk.rename(columns=rename_map)
        known_columns = [c for c in chunk.columns if c in ADDRESS_COLUMN_MAP.values()]
        chunk = chunk[known_columns]

        records = []
        for row in chunk.to_dict(orient="records"):
            try:
                records.append(_to_record(row))
            except ValueError as exc:
                logger.warning(f"Skipping malformed address row {row.get('raw_text')!r}: {exc}")
        yield records
