import sys
from typing import Callable, Iterable, List, Optional

from dotairc.models.airc_document import AggregateDocument, TemplateFound, TemplateNotFound

TemplateLookup = Callable[[str], Optional[str]]


def normalize_identifier(token: str) -> str:
    return token.strip().lower()


def parse_stack(value: str) -> List[str]:
    """Split a comma-separated stack into normalized identifiers. Empty tokens are kept."""
    return [normalize_identifier(tech) for tech in value.split(",")]


class Aggregator:
    def resolve(self, identifiers: Iterable[str], lookup: TemplateLookup) -> AggregateDocument:
        """
        Looks up every identifier in input order and collects the results.
        Duplicates are looked up (and included) as many times as they appear.
        """
        results = []
        for token in identifiers:
            tech = normalize_identifier(token)
            content = lookup(tech)
            if content is None:
                results.append(TemplateNotFound(identifier=tech))
            else:
                results.append(TemplateFound(identifier=tech, content=content))
        return AggregateDocument(results=results)

    def aggregate(self, identifiers: Iterable[str], lookup: TemplateLookup) -> str:
        """
        Combines the templates for the given identifiers into the final .airc text.
        Missing templates are reported on stderr and skipped.
        """
        document = self.resolve(identifiers, lookup)
        report_missing(document)
        return document.content


def report_missing(document: AggregateDocument) -> None:
    for tech in document.missing:
        print(f"Warning: No template found for {tech}", file=sys.stderr)
