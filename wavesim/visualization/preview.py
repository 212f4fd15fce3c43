import matplotlib.pyplot as plt


def preview_domain(domain, show: bool = True):
    """
    Visualize the domain setup.

    Draws the obstacle mask with sources and listeners on top,
    for checking a geometry before running it.

    Parameters
    ----------
    domain : GridDomain
        Domain to draw.
    show : bool, default=True
        Call ``plt.show()`` once the figure is drawn.

    Returns
    -------
    matplotlib.figure.Figure
        The preview figure.
    """
    fig = plt.figure(figsize=(8, 6))

    plt.imshow(domain.is_wall, origin='upper', cmap='Greys',
               extent=[0, domain.width, domain.height, 0], vmin=0, vmax=1)

    for i, s in enumerate(domain.sources):
        plt.plot(s.pos[0], s.pos[1], 'r*', markersize=12,
                 label='Source' if i == 0 else None)

    for j, l in enumerate(domain.listeners):
        plt.plot(l.pos[0], l.pos[1], 'go', markersize=8,
                 label='Mic' if j == 0 else None)

    plt.title(f"Domain Preview: {domain.width}x{domain.height}, {domain.wall_count} wall cells")
    plt.xlabel("x [cell]")
    plt.ylabel("y [cell]")
    if domain.sources or domain.listeners:
        plt.legend(loc='upper right')
    if show:
        plt.show()
    return fig
