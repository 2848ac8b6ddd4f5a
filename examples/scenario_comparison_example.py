#!/usr/bin/env python3
"""
Scenario Comparison Example

This example computes a reference mortgage, prints its milestones and
compares it with two alternative parameter sets.
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from amortlab import LoanParameters, ScenarioStore, compute, loan_summary  # noqa: E402
from amortlab.charts import cumulative_totals  # noqa: E402
from amortlab.report import comparison_table, key_insights, summary_rows  # noqa: E402


def main():
    """Run the scenario comparison example."""
    baseline = LoanParameters.from_inputs(250_000, 4.5, 30, 2010)

    print("🏠 Computing baseline schedule...")
    result = compute(baseline)
    summary = loan_summary(baseline)

    for label, value in summary_rows(summary):
        print(f"   {label}: {value}")
    for line in key_insights(result, summary):
        print(f"   • {line}")

    print("\n📊 Comparing scenarios...")
    store = ScenarioStore()
    store.save("30y @ 4.5%", baseline)
    store.save("15y @ 4.0%", baseline.with_changes(term_years=15, annual_rate_pct=4.0))
    store.save("30y @ 6.5%", baseline.with_changes(annual_rate_pct=6.5))

    print(comparison_table(store.compare()).to_string(index=False))

    fig, _ = cumulative_totals(result)
    print(f"\n📈 Chart '{fig.layout.title.text}' has {len(fig.data)} traces")


if __name__ == "__main__":
    main()
