import matplotlib.patches as patches
import matplotlib.pyplot as plt


def draw_beam_section_flexure(bw, h, cover, d, x, as_tension, as_compression=0.0):
    """Cross section with tension/compression steel and the neutral axis."""
    fig, ax = plt.subplots(figsize=(4, 4))
    rect = patches.Rectangle((0, 0), bw, h, linewidth=2, edgecolor='#333333', facecolor='#e0e0e0')
    ax.add_patch(rect)

    # Compressed zone of the stress block (0.8 x)
    if x > 0:
        ax.add_patch(patches.Rectangle((0, h - 0.8 * x), bw, 0.8 * x, facecolor='#90caf9', alpha=0.6))
        ax.plot([-2, bw + 2], [h - x, h - x], 'k--', linewidth=1)
        ax.text(bw + 2.5, h - x, "LN", va='center', fontsize=7)

    y_tension = h - d
    if as_tension > 0:
        ax.plot([cover, bw - cover], [y_tension, y_tension], 'r-', linewidth=3)
        ax.text(bw / 2, y_tension - 3.5, f"As: {as_tension:.2f}", ha='center', color='red', fontsize=8)

    if as_compression > 0:
        ax.plot([cover, bw - cover], [h - cover, h - cover], 'b-', linewidth=3)
        ax.text(bw / 2, h + 1.5, f"A's: {as_compression:.2f}", ha='center', color='blue', fontsize=8)

    ax.set_xlim(-5, bw + 8)
    ax.set_ylim(-6, h + 5)
    ax.set_aspect('equal')
    ax.axis('off')
    return fig


def draw_stirrup_layout(bw, h, cover, s, n_legs):
    """Draw cross section with stirrup legs and side elevation with spacing."""
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(7, 4), gridspec_kw={'width_ratios': [1, 1.2]})

    rect = patches.Rectangle((0, 0), bw, h, linewidth=2, edgecolor='#333333', facecolor='#e0e0e0')
    ax1.add_patch(rect)
    stirrup = patches.Rectangle(
        (cover, cover), bw - 2 * cover, h - 2 * cover,
        linewidth=2, edgecolor='#2e7d32', facecolor='none', linestyle='--'
    )
    ax1.add_patch(stirrup)

    if n_legs > 2:
        inner_width = bw - 2 * cover
        for i in range(1, n_legs - 1):
            x = cover + inner_width * i / (n_legs - 1)
            ax1.plot([x, x], [cover, h - cover], color='#2e7d32', linewidth=1.5, linestyle='--')

    ax1.set_xlim(-3, bw + 3)
    ax1.set_ylim(-3, h + 3)
    ax1.set_aspect('equal')
    ax1.set_title("Seção", fontsize=9)
    ax1.axis('off')

    beam_length = max(h * 1.5, 40)
    ax2.add_patch(patches.Rectangle((0, 0), beam_length, h, linewidth=2,
                                    edgecolor='#333333', facecolor='#f5f5f5'))
    if s and s > 0:
        x = cover
        while x < beam_length - cover:
            ax2.plot([x, x], [cover, h - cover], color='#2e7d32', linewidth=1.2)
            x += s
        ax2.set_title(f"Elevação (s = {s:.1f} cm)", fontsize=9)
    else:
        ax2.set_title("Elevação", fontsize=9)

    ax2.set_xlim(-3, beam_length + 3)
    ax2.set_ylim(-3, h + 3)
    ax2.set_aspect('equal')
    ax2.axis('off')

    fig.tight_layout()
    return fig


def draw_converter_comparison(original_diameter, original_spacing, equivalent_diameter, equivalent_spacing,
                              length=100.0):
    """Plan view of one meter of the original and the equivalent layout."""
    fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(7, 3), sharex=True)

    for ax, diameter, spacing, color, label in (
        (ax1, original_diameter, original_spacing, '#1565c0', "Original"),
        (ax2, equivalent_diameter, equivalent_spacing, '#ef6c00', "Equivalente"),
    ):
        ax.add_patch(patches.Rectangle((0, 0), length, 10, facecolor='#f5f5f5', edgecolor='#333333'))
        x = 0.0
        while spacing > 0 and x <= length:
            ax.plot([x, x], [0, 10], color=color, linewidth=max(diameter / 4, 0.8))
            x += spacing
        ax.set_title(f"{label}: Ø{diameter} mm c/ {spacing:.1f} cm", fontsize=9)
        ax.set_ylim(-1, 11)
        ax.axis('off')

    ax2.set_xlim(-2, length + 2)
    fig.tight_layout()
    return fig
