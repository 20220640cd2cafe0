"""
Visualization and reporting utilities.
"""


def format_search_result(mode: str, result) -> str:
    """
    One-line form of a search result:
        one, no witness  ->  None
        one, witness     ->  Some [1; 3; 0; 2]
        all              ->  number of witnesses
    """
    if mode == "all":
        return str(len(result))
    if result is None:
        return "None"
    return "Some [" + "; ".join(str(x) for x in result) + "]"


def print_board(witness):
    """Draw an n-queens witness: row i has its queen in column witness[i]."""
    n = len(witness)
    border = "+" + "---" * n + "+"
    print(border)
    for col in witness:
        print("|" + "".join(" Q " if c == col else " . " for c in range(n)) + "|")
    print(border)


def print_results(results):
    """Summarize a harness run: mean time per distinct task."""
    grouped = {}
    for r in results:
        grouped.setdefault(r.task, []).append(r)
    print(f"\n{'='*60}")
    print(f"{'task':<36} {'runs':>4} {'mean s':>9}  result")
    print(f"{'='*60}")
    for task, runs in grouped.items():
        mean = sum(r.elapsed for r in runs) / len(runs)
        print(f"{task.name:<36} {len(runs):>4} {mean:>9.4f}  {runs[0].result}")
    print(f"{'='*60}")
