import json
from typing import Any, Dict, List

import texttable

OUTPUT_JSON = 'json'

def render_table(headers: List[str], rows: List[Dict[str, Any]]) -> str:
    table = texttable.Texttable(max_width=0)
    table.set_cols_dtype(['t'] * len(headers))
    table.header(headers)
    for row in rows:
        table.add_row([row[h] for h in headers])
    return table.draw()

def render_json(rows: List[Dict[str, Any]]) -> str:
    return json.dumps(rows, separators=(',', ':'))

def print_records(headers: List[str], records: List[Any], output: str | None = None):
    """
    Prints records (objects with to_dict()) as a table, or as a JSON array
    when output is 'json'.
    """
    rows = [record.to_dict() for record in records]
    if output == OUTPUT_JSON:
        print(render_json(rows))
    else:
        print(render_table(headers, rows))
