import math

import numpy as np
import matplotlib.pyplot as plt


def phase_spread(history):
    """Per-frame standard deviation of every pendulum's offset from rest."""
    offsets = np.asarray(history, dtype=float) - math.pi
    return offsets.std(axis=1)


def find_realignment_frame(spread, threshold_ratio=0.25, skip=0):
    """
    First frame, after the spread peaks, where it drops back under
    threshold_ratio * peak. Returns None when the row never realigns.
    """
    spread = np.asarray(spread, dtype=float)[skip:]
    if spread.size == 0:
        return None
    peak = spread.max()
    if peak == 0.0:
        return None
    peak_idx = int(np.argmax(spread))
    below = np.nonzero(spread[peak_idx:] <= threshold_ratio * peak)[0]
    if below.size == 0:
        return None
    return skip + peak_idx + int(below[0])


def create_wave_plot(history, filename=None, frame_time=1.0 / 60.0):
    """Create (and optionally save) a plot of a recorded wave run."""
    history = np.asarray(history, dtype=float)
    frames, count = history.shape
    time = np.arange(frames) * frame_time
    spread = phase_spread(history)
    realign = find_realignment_frame(spread)

    fig = plt.figure(figsize=(16, 12))

    # Subplot 1: Angle traces
    ax = fig.add_subplot(2, 2, 1)
    for i in range(count):
        ax.plot(time, np.degrees(history[:, i] - math.pi), label=f"#{i}", lw=0.8)
    ax.grid(True)
    ax.set_xlabel('Time (s)')
    ax.set_ylabel('Angle from rest (degrees)')
    ax.set_title('Pendulum Angles')
    if count <= 10:
        ax.legend()

    # Subplot 2: Spread
    ax = fig.add_subplot(2, 2, 2)
    ax.plot(time, np.degrees(spread), 'm-')
    if realign is not None:
        ax.axvline(x=time[realign], color='r', linestyle='--', alpha=0.5)
    ax.grid(True)
    ax.set_xlabel('Time (s)')
    ax.set_ylabel('Spread (degrees)')
    ax.set_title('Phase Spread Across the Row')

    # Subplot 3: Snapshot of the wave shape
    ax = fig.add_subplot(2, 2, 3)
    for frame in np.linspace(0, frames - 1, 5, dtype=int):
        ax.plot(np.arange(count), np.degrees(history[frame] - math.pi),
                marker='o', label=f"t={time[frame]:.1f}s")
    ax.grid(True)
    ax.set_xlabel('Pendulum')
    ax.set_ylabel('Angle from rest (degrees)')
    ax.set_title('Wave Shape')
    ax.legend()

    # Subplot 4: Metrics Table
    ax = fig.add_subplot(2, 2, 4)
    ax.axis('off')
    metrics = [
        ['Pendulums', 'Frames', 'Max Spread (°)', 'Realignment (s)'],
        [
            str(count),
            str(frames),
            f"{np.degrees(spread.max()):.2f}",
            f"{time[realign]:.2f}" if realign is not None else "-",
        ],
    ]
    table = ax.table(cellText=metrics, loc='center', cellLoc='center')
    table.auto_set_font_size(False)
    table.set_fontsize(10)
    table.scale(1, 1.5)
    ax.set_title('Wave Metrics')

    fig.suptitle(f"Pendulum Wave - {count} pendulums", fontsize=16)
    fig.tight_layout()

    if filename:
        fig.savefig(filename)

    return fig
