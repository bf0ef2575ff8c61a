class RowIdConverter:
    """Path segment for a 64-bit row id.

    Digits that do not fit a signed bigint fail to match, so the request
    falls through to the 404 handler instead of reaching the database.
    """

    regex = "[0-9]+"
    max_value = 2**63 - 1

    def to_python(self, value: str) -> int:
        row_id = int(value)
        if row_id > self.max_value:
            raise ValueError(f"id {value} exceeds bigint range")
        return row_id

    def to_url(self, value) -> str:
        return str(value)
