"""Handler factory: bundles matchers and a processor into one named unit.

Every pattern category is exposed as a ``Handler``. Calling a handler with a
document, the current accumulator and a match context tries its matchers in
order; the first real match is folded into a *new* accumulator by the
processor. Handlers hold no per-call state.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .document import TaggedDocument
from .models import HandlerResult, MatchContext, PatternMatch, RecurrenceOptions

logger = logging.getLogger(__name__)

Matcher = Callable[[TaggedDocument, MatchContext], Optional[PatternMatch]]
Processor = Callable[[RecurrenceOptions, PatternMatch], RecurrenceOptions]

DEFAULT_CATEGORY = 'general'
DEFAULT_PRIORITY = 100


@dataclass(frozen=True)
class Handler:
    name: str
    category: str
    priority: int
    matchers: tuple[Matcher, ...]
    processor: Processor
    description: str = ''

    def __call__(self, doc: TaggedDocument, options: RecurrenceOptions, ctx: MatchContext) -> HandlerResult:
        warnings: list[str] = []
        if not doc:
            return HandlerResult(matched=False, options=options)
        for matcher in self.matchers:
            try:
                match = matcher(doc, ctx)
            except Exception as exc:
                logger.exception('matcher %s of handler %r failed', getattr(matcher, '__name__', matcher), self.name)
                warnings.append(f'Error in {self.name} matcher: {exc}')
                continue
            if match is None:
                continue
            warnings.extend(match.warnings)
            if match.value is None:
                # diagnostic-only match: keep looking
                continue
            try:
                updated = self.processor(options, match)
            except Exception as exc:
                logger.exception('processor of handler %r failed on %r', self.name, match.matched_text)
                warnings.append(f'Error in {self.name} processor: {exc}')
                continue
            return HandlerResult(
                matched=True,
                options=updated,
                confidence=match.confidence,
                warnings=tuple(warnings),
            )
        return HandlerResult(matched=False, options=options, warnings=tuple(warnings))


def create_handler(
    name: str,
    matchers,
    processor: Processor,
    category: str | None = None,
    priority: int | None = None,
    description: str | None = None,
) -> Handler:
    """Create a handler from an ordered list of matchers and one processor.

    Raises ValueError for an empty name, an empty matcher list or a
    non-callable matcher/processor; these are registration bugs, not input
    problems.
    """
    if not name or not name.strip():
        raise ValueError('pattern handler name is required')
    matchers = tuple(matchers or ())
    if not matchers:
        raise ValueError(f'pattern handler {name!r} requires at least one matcher')
    for m in matchers:
        if not callable(m):
            raise ValueError(f'pattern handler {name!r} got a non-callable matcher: {m!r}')
    if not callable(processor):
        raise ValueError(f'pattern handler {name!r} requires a callable processor')
    return Handler(
        name=name,
        category=category or DEFAULT_CATEGORY,
        priority=DEFAULT_PRIORITY if priority is None else priority,
        matchers=matchers,
        processor=processor,
        description=description or f'Recognizes {name} patterns',
    )
