"""JSON 导出器"""
import json
from .base_exporter import BaseExporter


class JsonExporter(BaseExporter):
    def export(self, items, path):
        with open(path, 'w', encoding='utf-8') as f:
            json.dump([item.to_dict() for item in items], f, ensure_ascii=False, indent=2)
