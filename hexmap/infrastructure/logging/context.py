"""Logging context management for render pass correlation."""

from contextlib import contextmanager
from typing import Optional, Dict, Any, List
import uuid
import time

from .structured_logger import (
    session_context, node_context, stage_context,
    get_logger
)


class LoggingContext:
    """Manages logging context for a hexagon layer session.

    Provides hierarchical context management for:
    - Layer sessions (one per attached map surface)
    - Stages (data load, render pass)
    - Operations within stages

    Context is automatically propagated to all log messages within scope.
    """

    def __init__(self, session_id: Optional[str] = None):
        """Initialize logging context.

        Args:
            session_id: Session UUID (generated if not provided)
        """
        self.session_id = session_id or str(uuid.uuid4())
        self.node_stack: List[str] = []
        self.stage_stack: List[str] = []
        self.timings: Dict[str, Dict[str, Any]] = {}
        self.logger = get_logger(self.__class__.__name__)

    @contextmanager
    def stage(self, name: str, **metadata):
        """Context for stage execution.

        Example:
            with ctx.stage('data_load'):
                # Stage code here
        """
        session_context.set(self.session_id)
        stage_context.set(name)
        self.stage_stack.append(name)

        parent = self.node_stack[-1] if self.node_stack else "layer"
        node_id = f"{parent}/{name}"
        node_context.set(node_id)
        self.node_stack.append(node_id)

        start_time = time.time()

        self.logger.debug(
            f"Stage started: {name}",
            extra={'context': {'stage_name': name, **metadata}}
        )

        status = 'failed'
        try:
            yield self
            status = 'completed'
        except Exception as e:
            self.logger.log_error_with_context(e, operation=f"stage_{name}")
            raise
        finally:
            duration = time.time() - start_time
            self.timings[node_id] = {
                'duration': duration,
                'status': status,
            }

            self.logger.log_performance(
                f"stage_{name}",
                duration,
                status=status,
                **metadata
            )

            self.stage_stack.pop()
            self.node_stack.pop()

            stage_context.set(self.stage_stack[-1] if self.stage_stack else None)
            node_context.set(self.node_stack[-1] if self.node_stack else None)

    @contextmanager
    def operation(self, name: str, **metadata):
        """Context for specific operations within stages.

        Example:
            with ctx.operation('aggregate', resolution=7):
                # Operation code here
        """
        parent = self.node_stack[-1] if self.node_stack else "layer"
        node_id = f"{parent}/{name}"
        node_context.set(node_id)
        self.node_stack.append(node_id)

        self.logger.debug(
            f"Operation started: {name}",
            extra={'context': metadata}
        )

        try:
            yield self
        except Exception as e:
            self.logger.log_error_with_context(e, operation=name, **metadata)
            raise
        finally:
            self.node_stack.pop()
            node_context.set(self.node_stack[-1] if self.node_stack else None)

    def get_timings(self) -> Dict[str, Dict[str, Any]]:
        """Get timing information for all stages."""
        return self.timings.copy()

    @property
    def current_node(self) -> Optional[str]:
        """Get current node ID."""
        return self.node_stack[-1] if self.node_stack else None
