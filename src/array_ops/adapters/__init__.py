from .sequence import SequenceAdapter, ReadOnlyAdapter, adapt

__all__ = ['SequenceAdapter', 'ReadOnlyAdapter', 'adapt']
