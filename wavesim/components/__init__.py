from wavesim.components.sources import Source, HarmonicSource
from wavesim.components.listeners import Listener
