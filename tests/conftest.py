"""Shared test fixtures for generator tests."""
from datetime import datetime, timezone

import pytest

from generators.models import DesignElement

FIXED_TIME = datetime(2026, 1, 15, 9, 30, tzinfo=timezone.utc)
FIXED_TIMESTAMP = '2026-01-15T09:30:00.000Z'


@pytest.fixture
def fixed_clock():
    """Clock that always reports FIXED_TIME."""
    return lambda: FIXED_TIME


@pytest.fixture
def button_element():
    """Styled primary button."""
    return DesignElement(
        id='btn-1',
        type='button',
        name='Primary Button',
        x=16, y=200, width=120, height=40,
        args={
            'text': 'Go',
            'backgroundColor': '#0ea5e9',
            'textColor': '#ffffff',
            'borderRadius': 8,
            'padding': 12,
        },
    )


@pytest.fixture
def sample_tree(button_element):
    """Login card with heading, email input, button and a hero image."""
    return [
        DesignElement(
            id='title',
            type='text',
            name='Heading',
            x=16, y=24, width=300, height=32,
            args={'text': 'Welcome back', 'fontSize': 24, 'fontWeight': 'bold', 'textColor': '#1e293b'},
        ),
        DesignElement(
            id='card-1',
            type='card',
            name='Login Card',
            x=16, y=80, width=358, height=320,
            args={'backgroundColor': '#ffffff', 'borderRadius': 16, 'padding': 24},
            children=[
                DesignElement(
                    id='email',
                    type='input',
                    name='Email',
                    x=32, y=100, width=326, height=44,
                    args={'placeholder': 'you@example.com', 'type': 'email', 'required': True},
                ),
                button_element,
            ],
        ),
        DesignElement(
            id='hero',
            type='image',
            name='Hero illustration',
            x=16, y=420, width=320, height=180,
            args={'src': 'https://example.com/hero.png'},
        ),
    ]


@pytest.fixture
def ordered_container():
    """Container whose children must keep the order Alpha, Bravo, Charlie."""
    return DesignElement(
        id='stack',
        type='container',
        name='Stack',
        children=[
            DesignElement(id='a', type='text', name='A', args={'text': 'Alpha'}),
            DesignElement(id='b', type='text', name='B', args={'text': 'Bravo'}),
            DesignElement(id='c', type='text', name='C', args={'text': 'Charlie'}),
        ],
    )


@pytest.fixture
def bare_elements():
    """One element of every type, none with args."""
    return [
        DesignElement(id=f'bare-{element_type}', type=element_type, name=element_type.title())
        for element_type in ('button', 'input', 'text', 'image', 'container', 'card', 'list', 'icon')
    ]
