"""Where outline text comes from.

Outline generation from a topic is done by an external service; this
module only defines the calling convention, validates what comes back and
ships an offline template generator for demos and tests.
"""

from __future__ import annotations

import logging
from typing import Protocol

from outlinemap.exceptions import GenerationError
from outlinemap.outline.parser import parse_outline

logger = logging.getLogger(__name__)


class OutlineGenerator(Protocol):
    """Produces outline text for a topic. May raise on network or format errors."""

    def __call__(self, topic: str) -> str: ...


DEFAULT_OUTLINE = """# Welcome to Mindmap Maker

## Getting Started
  - Enter a Topic
    - Type your topic in the sidebar
    - Click "Generate Mindmap"
  - Try Example Topics
    - Personal finance
    - Career tips
    - Plan trip
    - Learn about AI

## Features
  - Customize Layout
    - Right layout
    - Bidirectional layout
  - Choose Colors
    - Default
    - Vibrant
    - Summer
    - Monochrome
  - Themes
    - Dark
    - Light

## Export Options
  - Download as PNG
    - High-quality image
    - Use in presentations
  - Download as HTML
    - Interactive version
    - Shareable file"""

_PREPARED: dict[str, str] = {
    "career tips": """# Career Tips
## Skill Development
### Technical Skills
#### Industry-specific tools
#### Programming languages
#### Certifications
### Soft Skills
#### Communication
#### Leadership
#### Problem-solving
## Networking
### Professional Associations
### Industry Events
### Online Platforms
#### LinkedIn
#### Industry forums
## Job Search
### Resume Building
### Interview Preparation
### Negotiation Skills
## Work-Life Balance
### Time Management
### Stress Management
### Boundaries""",
    "plan trip": """# Trip Planning
## Destination Research
### Climate and Weather
### Local Customs
### Safety Considerations
## Transportation
### Flights
#### Booking strategies
#### Loyalty programs
### Ground Transportation
#### Public transit
#### Car rentals
## Accommodation
### Hotels
### Vacation Rentals
### Hostels
## Packing
### Clothing
### Electronics
### Toiletries
## Documentation
### Passports
### Visas
### Travel Insurance""",
    "learn about ai": """# Artificial Intelligence
## Machine Learning
### Supervised Learning
#### Classification
#### Regression
### Unsupervised Learning
#### Clustering
#### Dimensionality Reduction
### Reinforcement Learning
## Neural Networks
### Feedforward Networks
### Convolutional Networks
### Recurrent Networks
#### LSTM
#### GRU
### Transformers
## Natural Language Processing
### Text Classification
### Machine Translation
### Question Answering
## Ethics in AI
### Bias and Fairness
### Privacy Concerns
### Transparency""",
}

_GENERIC = """# {title}
## Key Concepts
### Concept 1
#### Sub-concept 1.1
#### Sub-concept 1.2
### Concept 2
#### Sub-concept 2.1
#### Sub-concept 2.2
## Applications
### Application 1
### Application 2
## Resources
### Books
### Online Courses
### Communities"""


class TemplateOutlineGenerator:
    """Offline generator: prepared outlines for a few topics, a skeleton otherwise."""

    def __call__(self, topic: str) -> str:
        prepared = _PREPARED.get(topic.strip().lower())
        if prepared is not None:
            return prepared
        title = topic.strip()
        return _GENERIC.format(title=title[:1].upper() + title[1:])


def generate_outline(topic: str, generator: OutlineGenerator | None = None) -> str:
    """Ask a generator for an outline and check that it parses to something.

    Args:
        topic: Subject of the outline
        generator: Source of outline text; TemplateOutlineGenerator by default

    Returns:
        Outline text

    Raises:
        GenerationError: Blank topic, generator failure, or output without
            any outline content
    """
    if not topic.strip():
        raise GenerationError(topic, "Topic must not be blank")

    generator = generator or TemplateOutlineGenerator()
    try:
        text = generator(topic)
    except Exception as e:
        logger.warning("Outline generator failed for %r: %s", topic, e)
        raise GenerationError(topic, f"Outline generator failed for '{topic}': {e}") from e

    if not isinstance(text, str) or parse_outline(text).is_placeholder:
        raise GenerationError(topic, f"Generator returned no outline content for '{topic}'")
    return text
