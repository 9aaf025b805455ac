# informed_search/benchmarks/plot_results.py
from __future__ import annotations
import argparse
import json
from pathlib import Path
import matplotlib.pyplot as plt

HERE = Path(__file__).parent
RESULTS_JSON = HERE / "results.json"

# (row key, panel title) for the single-bar panels
PANELS = [("cost", "Path cost"), ("time_s", "Time (s)"), ("peak_kb", "Peak memory (KB)")]

def _load_rows(path: Path):
    if not path.exists():
        raise SystemExit(f"Missing {path}. Run: python -m informed_search.benchmarks.run_all")
    data = json.loads(path.read_text())
    rows = data.get("results", [])
    # Keep only successful runs
    rows = [r for r in rows if r.get("success")]
    if not rows:
        raise SystemExit("No successful rows to plot.")
    return data.get("problem", "?"), rows

def _fmt_table(rows):
    # Markdown table
    lines = [
        "| Algorithm | Cost | Nodes Visited | Nodes Expanded | Time (s) | Peak KB |",
        "|---|---:|---:|---:|---:|---:|",
    ]
    def fnum(x):
        if isinstance(x, (int, float)):
            return f"{x:.6f}" if isinstance(x, float) else f"{x}"
        return "n/a"
    for r in rows:
        lines.append(
            f"| {r['algo']} | {fnum(r.get('cost'))} | {fnum(r.get('nodes_visited'))} | "
            f"{fnum(r.get('nodes_expanded'))} | {fnum(r.get('time_s'))} | {fnum(r.get('peak_kb'))} |"
        )
    return "\n".join(lines)

def _plot(rows, problem):
    """One row of panels: visited vs expanded nodes side by side, then one panel per PANELS entry."""
    algos = [r["algo"] for r in rows]
    xs = range(len(algos))
    fig, axes = plt.subplots(1, 1 + len(PANELS), figsize=(4 * (1 + len(PANELS)), 4))

    ax = axes[0]
    width = 0.4
    ax.bar([x - width / 2 for x in xs], [r["nodes_visited"] for r in rows], width, label="visited")
    ax.bar([x + width / 2 for x in xs], [r["nodes_expanded"] for r in rows], width, label="expanded")
    ax.set_title("Nodes")
    ax.legend()

    for ax, (key, title) in zip(axes[1:], PANELS):
        ax.bar(list(xs), [r.get(key) or 0 for r in rows])
        ax.set_title(title)

    for ax in axes:
        ax.set_xticks(list(xs))
        ax.set_xticklabels(algos, rotation=30, ha="right")
    fig.suptitle(f"Best-first variants on {problem}")
    fig.tight_layout()
    return fig

def main(argv=None):
    parser = argparse.ArgumentParser(description="Summarise results.json as markdown and a bar chart.")
    parser.add_argument("--results", type=Path, default=RESULTS_JSON)
    parser.add_argument("--out-dir", type=Path, default=None)
    args = parser.parse_args(argv)
    out_dir = args.out_dir or args.results.parent

    problem, rows = _load_rows(args.results)

    # Save a markdown summary
    md_path = out_dir / "results.md"
    md_path.write_text(_fmt_table(rows) + "\n")
    print(f"Wrote {md_path}")

    fig = _plot(rows, problem)
    png_path = out_dir / "comparison.png"
    fig.savefig(png_path, format="png", dpi=160)
    plt.close(fig)
    print(f"Wrote {png_path}")
    return md_path, png_path

if __name__ == "__main__":
    main()
