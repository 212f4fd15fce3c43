from wavesim.visualization.render import field_to_rgb, sigmoid
from wavesim.visualization.animator import PhysicsAnimator
from wavesim.visualization.preview import preview_domain
