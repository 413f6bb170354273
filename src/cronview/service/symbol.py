# SPDX-License-Identifier: MIT

from cronview.model.job import Job, JobDefinition

NUM_LOWERCASE = 26
NUM_UPPERCASE = 26
NUM_DIGITS = 10

# Unicode code point for ①
CIRCLED_NUMBER_START = 0x2460


def symbol_for(index: int) -> str:
    """
    Get the display symbol for the job at the given index.

    Indices map to a-z, then A-Z, then 0-9, then consecutive code points
    starting at ①. Past ⑳ the code points leave the circled number block and
    are not guaranteed to be printable.

    Args:
        index: Zero-based position of the job in the job list

    Returns:
        A single character symbol
    """
    if index < NUM_LOWERCASE:
        return chr(ord("a") + index)

    if index < NUM_LOWERCASE + NUM_UPPERCASE:
        return chr(ord("A") + index - NUM_LOWERCASE)

    if index < NUM_LOWERCASE + NUM_UPPERCASE + NUM_DIGITS:
        return str(index - NUM_LOWERCASE - NUM_UPPERCASE)

    offset = index - NUM_LOWERCASE - NUM_UPPERCASE - NUM_DIGITS
    return chr(CIRCLED_NUMBER_START + offset)


def job_label(definition: JobDefinition) -> str:
    description = definition.get("description")
    if description:
        return description
    return definition["command"]


def build_jobs(definitions: list[JobDefinition]) -> list[Job]:
    return [
        {
            "index": index,
            "symbol": symbol_for(index),
            "expression": definition["expression"],
            "label": job_label(definition),
        }
        for index, definition in enumerate(definitions)
    ]
