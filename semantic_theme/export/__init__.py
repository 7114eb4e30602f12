from .json_export import export_json, values_to_dict
from .report import generate_readability_report, print_palette

__all__ = ["export_json", "generate_readability_report", "print_palette", "values_to_dict"]
