"""
Tiny helper script showing the library API without the CLI.
"""

from __future__ import annotations

from text_analyzer import AnalyzerConfig, analyze, render_report


def main() -> None:
    config = AnalyzerConfig(top_n=5, word_column_width=12)
    samples = [
        "The cat sat on the mat. It was raining outside, but the cat was warm and happy.",
        "¿Dónde está la biblioteca? La biblioteca está cerrada.",
    ]

    for sample in samples:
        stats = analyze(sample)
        print("-" * 40)
        print(render_report(stats, config.top_n, word_width=config.word_column_width))


if __name__ == "__main__":
    main()
