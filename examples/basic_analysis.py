"""
Basic usage example for Sheet Analyzer.

This script demonstrates how to:
1. Load configuration
2. Load a sheet into a Grid
3. Analyze it
4. Generate reports
"""

import sys

from sheet_analyzer import AnalysisConfig, ConfigLoader, GridLoader, ReportGenerator, SheetProfiler


def main(path: str):
    config = ConfigLoader()
    analysis_config = AnalysisConfig.from_dict(config.get_analysis_config())

    grid = GridLoader(max_file_size_mb=config.get('loader.max_file_size_mb', 10)).load(path)

    print(f"Analyzing {path} ({grid.row_count} rows, {grid.width} columns)...")
    report = SheetProfiler(analysis_config).profile(grid)

    report_gen = ReportGenerator(output_dir="./reports")
    report_files = report_gen.generate_report(report, source_name=path, formats=['json', 'html'])

    print(f"\n✅ Analysis complete!")
    print(f"Reports generated:")
    for fmt, path in report_files.items():
        print(f"  - {fmt.upper()}: {path}")

    for stat in report.numeric_columns:
        print(f"  {stat.name}: mean={stat.numeric.mean}, median={stat.numeric.median}")

    if report.duplicate_rows:
        print(f"\n⚠️  Duplicate rows: {report.duplicate_rows}")


if __name__ == '__main__':
    main(sys.argv[1] if len(sys.argv) > 1 else 'data.xlsx')
