from ..color import contrast_ratio, lightness
from ..styles import Style

MIN_TEXT_CONTRAST = 4.5  # WCAG AA for body text
MIN_FADED_CONTRAST = 3.0  # Faded text is meant to recede

# Faces whose foreground is intentionally low contrast
FADED_FACES = ("faded", "mode-line-inactive")


def generate_readability_report(values):
    """Generate a contrast report for every face with a foreground

    Returns:
        tuple: (report text, list of (face, foreground, achieved, required))
    """
    default = values["default"]
    default_bg = default.background

    report = []
    report.append("=" * 70)
    report.append("READABILITY REPORT")
    report.append("=" * 70)
    report.append(f"Background: {default_bg} (L*: {lightness(default_bg):.1f})")
    report.append(
        f"Foreground: {default.foreground} (L*: {lightness(default.foreground):.1f})"
    )
    report.append("")

    issues = []
    for name, style in values.items():
        if not isinstance(style, Style) or style.foreground is None:
            continue
        foreground = style.foreground
        background = style.background or default_bg
        required = MIN_FADED_CONTRAST if name in FADED_FACES else MIN_TEXT_CONTRAST
        achieved = contrast_ratio(foreground, background)

        status = "✓" if achieved >= required else "✗ FAIL"
        if achieved < required:
            issues.append((name, foreground, achieved, required))

        report.append(
            f"  {name:22} {foreground} on {background}  {achieved:4.1f}:1 (min {required}:1)  {status}"
        )

    report.append("\n" + "=" * 70)
    if issues:
        report.append(f"ISSUES FOUND: {len(issues)}")
        for name, hex_val, achieved, required in issues:
            report.append(
                f"  - {name}: {hex_val} has {achieved:.1f}:1, needs {required}:1"
            )
    else:
        report.append("ALL FACES PASS CONTRAST REQUIREMENTS ✓")
    report.append("=" * 70)

    return "\n".join(report), issues


def print_palette(values):
    """Print the derived settings and faces"""
    print("\n" + "=" * 60)
    print("SEMANTIC THEME")
    print("=" * 60)

    print("\nSETTINGS:")
    for name, value in values.items():
        if isinstance(value, str):
            print(f"  {name:22} {value}")

    print("\nFACES:")
    for name, value in values.items():
        if isinstance(value, Style):
            fg = value.foreground or "-"
            bg = value.background or "-"
            flags = " bold" if value.weight == "bold" else ""
            print(f"  {name:22} fg {fg:8} bg {bg:8}{flags}")
