from __future__ import annotations


# extracted text and the position just past the closing delimiter
ScanResult = tuple[str | None, int | None]
