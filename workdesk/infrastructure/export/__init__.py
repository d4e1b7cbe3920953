from .xlsx_exporter import XlsxWorkHoursExporter

__all__ = ["XlsxWorkHoursExporter"]
