"""
Arithmetic Circuit Synthesizer - Main Entry Point

This script provides a small interactive front end:
    1. Synthesis Demo - Walk through cells, compression and costs
    2. Operator Report - Synthesize one operator and print its netlist
    3. Verification - Exhaustively check an operator
    4. Quick Demo - A short tour of everything

Run with:
    python -m arithsynth.main
"""


def print_banner():
    """Print the banner."""
    print()
    print("╔" + "═" * 68 + "╗")
    print("║" + " " * 68 + "║")
    print("║" + " " * 20 + "ARITHMETIC CIRCUIT SYNTHESIZER" + " " * 18 + "║")
    print("║" + " " * 68 + "║")
    print("╚" + "═" * 68 + "╝")
    print()


def print_menu():
    """Print the main menu."""
    print("  [1] Synthesis Demo")
    print("      Adder cells, column compression, cost scaling")
    print()
    print("  [2] Operator Report")
    print("      Synthesize an adder, popcount or multiplier and list its gates")
    print()
    print("  [3] Verification")
    print("      Exhaustively check an operator with the gate simulator")
    print()
    print("  [4] Quick Demo")
    print()
    print("  [q] Quit")
    print()


def _build(kind: str, width: int):
    from arithsynth.synth.report import (
        synthesize_adder, synthesize_multiplier, synthesize_popcount,
    )

    builders = {
        "adder": synthesize_adder,
        "popcount": synthesize_popcount,
        "multiplier": synthesize_multiplier,
    }
    if kind not in builders:
        raise ValueError(f"Unknown operator '{kind}' (choose from {', '.join(builders)})")
    return builders[kind](width)


def _ask_operator():
    kind = input("Operator (adder/popcount/multiplier): ").strip().lower()
    width = int(input("Width in bits: ").strip())
    return kind, width


def run_demo():
    """Run the synthesis demo."""
    from arithsynth.synth.demo import main as demo_main
    demo_main()


def run_report(kind: str, width: int):
    """Synthesize one operator and print its report and netlist."""
    from arithsynth.visualizer.graph import format_netlist

    report = _build(kind, width)
    print()
    print(report.summary())
    print()
    print(format_netlist(report.netlist, report.outputs))


def run_verification(kind: str, width: int):
    """Exhaustively verify one operator."""
    from arithsynth.simulator.verify import verify_adder, verify_multiplier, verify_popcount

    checks = {
        "adder": verify_adder,
        "popcount": verify_popcount,
        "multiplier": verify_multiplier,
    }
    if kind not in checks:
        raise ValueError(f"Unknown operator '{kind}' (choose from {', '.join(checks)})")
    result = checks[kind](width, verbose=False)
    print()
    print(result.summary())


def run_quick_demo():
    """Short tour: one report, one verification."""
    print("\n" + "-" * 70)
    print("1. 4-BIT MULTIPLIER")
    print("-" * 70)
    report = _build("multiplier", 4)
    print(report.summary())

    print("\n" + "-" * 70)
    print("2. EXHAUSTIVE CHECK")
    print("-" * 70)
    run_verification("multiplier", 4)

    print("\n" + "=" * 70)
    print("QUICK DEMO COMPLETE")
    print("=" * 70)


def main():
    """Main entry point."""
    print_banner()

    while True:
        print_menu()

        choice = input("Enter your choice: ").strip().lower()

        try:
            if choice == '1':
                run_demo()
            elif choice == '2':
                run_report(*_ask_operator())
            elif choice == '3':
                run_verification(*_ask_operator())
            elif choice == '4':
                run_quick_demo()
            elif choice == 'q':
                print("\nGoodbye!")
                break
            else:
                print("\nInvalid choice. Please try again.")
        except ValueError as e:
            print(f"\nError: {e}")

        print()
        input("Press Enter to continue...")
        print("\n" * 2)


if __name__ == "__main__":
    main()
