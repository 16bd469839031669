from .flow_ticker import FlowTicker

__all__ = ['FlowTicker']
