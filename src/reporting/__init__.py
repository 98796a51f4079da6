"""
reporting - Turning analysis results into human-readable artifacts

    report     - Immutable PerformanceReport / ApiPerformanceSection model
    generator  - ReportGenerator: merges analysis with API & system metrics
    renderers  - to_markdown, to_html, to_csv (pure functions)
    writer     - write_reports: the only module that writes report files
    plots      - matplotlib charts of the measured execution times
"""
