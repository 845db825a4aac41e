"""输出导出器包"""
from .base_exporter import BaseExporter
from .json_exporter import JsonExporter
from .csv_exporter import CsvExporter


def exporter_for(path: str) -> BaseExporter:
    """根据文件扩展名选择导出格式，默认 JSON"""
    if str(path).lower().endswith('.csv'):
        return CsvExporter()
    return JsonExporter()


__all__ = ["BaseExporter", "JsonExporter", "CsvExporter", "exporter_for"]
