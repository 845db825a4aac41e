"""CSV 导出器"""
import csv
from .base_exporter import BaseExporter

FIELDS = ["name", "kind", "records", "error", "elapsed"]


class CsvExporter(BaseExporter):
    def export(self, items, path):
        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(FIELDS)  # header
            for item in items:
                writer.writerow([item.name, item.kind.value, ' '.join(item.records),
                                 item.error or '', f"{item.elapsed:.3f}"])
