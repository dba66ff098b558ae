"""AI-assisted message drafting and account analysis."""

import json
from typing import Protocol, Sequence

from salesmaster.domain.entities import AccountRecord, Field
from salesmaster.domain.errors import ValidationError

ANALYSIS_SAMPLE_SIZE = 30


class TextGenerator(Protocol):
    def generate(self, prompt: str) -> str: ...


def reminder_prompt(record: AccountRecord, vendor_name: str, video_link: str) -> str:
    return (
        f"Write a WhatsApp message for {record.get(Field.CLIENT, '')}. "
        f"They owe {record.get(Field.AMOUNT, '')}. "
        f"Status: {record.get(Field.STATUS, '')}. "
        f"I am {vendor_name}. Link: {video_link}."
    )


def analysis_prompt(records: Sequence[AccountRecord]) -> str:
    sample = [record.to_document() for record in records[:ANALYSIS_SAMPLE_SIZE]]
    return (
        f"Analyze this sales data (JSON): {json.dumps(sample, ensure_ascii=False)}. "
        "Give me a short executive report."
    )


class DraftingService:
    """Service for text drafted by the text-generation endpoint.

    Results are whatever the generator returns, including its error strings;
    callers show them to the user for editing.
    """

    def __init__(self, generator: TextGenerator):
        self.generator = generator

    def draft_reminder(self, record: AccountRecord, vendor_name: str, video_link: str) -> str:
        """Draft a payment reminder for one client."""
        return self.generator.generate(reminder_prompt(record, vendor_name, video_link))

    def analyze_accounts(self, records: Sequence[AccountRecord]) -> str:
        """Ask for a short executive report on the first records.

        Raises:
            ValidationError: If there are no records
        """
        if not records:
            raise ValidationError("No data to analyze")
        return self.generator.generate(analysis_prompt(records))
