# ohs/registers/export.py
import csv
import io
from datetime import date

from flask import Response, send_file
from openpyxl import Workbook

from ohs.errors import ValidationError

XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _flat(value):
    """Flatten nested relation values into a single spreadsheet cell."""
    if value is None:
        return ""
    if isinstance(value, dict):
        return value.get("name") or value.get("id") or ""
    if isinstance(value, list):
        return ";".join(str(v.get("id", "")) if isinstance(v, dict) else str(v) for v in value)
    return value


def export_rows(resource, records):
    cols = resource.columns
    rows = []
    for record in records:
        data = resource.dump(record)
        rows.append([_flat(data.get(c)) for c in cols])
    return cols, rows


def export_response(resource, records, fmt):
    cols, rows = export_rows(resource, records)
    stamp = date.today().isoformat()
    filename = f"{resource.name}_{stamp}"

    if fmt == "csv":
        buf = io.StringIO()
        w = csv.writer(buf)
        w.writerow(cols)
        w.writerows(rows)
        return Response(
            buf.getvalue(),
            mimetype="text/csv",
            headers={"Content-Disposition": f'attachment; filename="{filename}.csv"'},
        )

    if fmt == "xlsx":
        wb = Workbook()
        ws = wb.active
        ws.title = resource.label[:31]
        ws.append(cols)
        for row in rows:
            ws.append(row)
        out = io.BytesIO()
        wb.save(out)
        out.seek(0)
        return send_file(out, mimetype=XLSX_MIME, as_attachment=True,
                         download_name=f"{filename}.xlsx")

    raise ValidationError(f"Unsupported export format '{fmt}'")
