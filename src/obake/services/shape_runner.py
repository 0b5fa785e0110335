"""Default shape runner: records what would be handed to a container runtime."""

import logging

from obake.models import ShapeLaunch

logger = logging.getLogger(__name__)


class LoggingShapeRunner:
    """
    Shape runner that only logs.

    Container lifecycle management is not implemented; this runner resolves
    nothing further and keeps a record of the launches it was given, in order.
    """

    def __init__(self):
        self.started: list[ShapeLaunch] = []
        self.stopped: list[ShapeLaunch] = []

    def start_shape(self, launch: ShapeLaunch) -> None:
        if launch.has_container:
            logger.info(f"Shape '{launch.name}' image: {launch.image_path}")
        else:
            logger.info(f"Shape '{launch.name}' has no container image")

        if launch.env:
            logger.info(f"Shape '{launch.name}' environment: {launch.env}")

        self.started.append(launch)

    def stop_shape(self, launch: ShapeLaunch) -> None:
        if launch.has_container:
            logger.info(f"Stopping shape '{launch.name}' container: {launch.image_path}")
        else:
            logger.info(f"Shape '{launch.name}' has no container to stop")

        self.stopped.append(launch)
