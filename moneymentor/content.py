"""Static content: form suggestions, money tips and weekly challenges."""

from __future__ import annotations

from typing import Dict, List

from .models import EXPENSE, INCOME

CATEGORY_SUGGESTIONS: Dict[str, List[str]] = {
    INCOME: [
        'Pocket Money',
        'Part-time Job',
        'Scholarship',
        'Freelance',
        'Gift',
        'Other',
    ],
    EXPENSE: [
        'Food',
        'Transport',
        'Books & Supplies',
        'Rent',
        'Mobile & Internet',
        'Entertainment',
        'Shopping',
        'Health',
        'Other',
    ],
}

FINANCIAL_TIPS: List[Dict[str, str]] = [
    {
        'title': 'Follow the 50/30/20 rule',
        'body': 'Put half of your money toward needs, 30% toward wants and save the remaining 20%.',
    },
    {
        'title': 'Pay yourself first',
        'body': 'Move your savings aside the day money comes in, before you start spending.',
    },
    {
        'title': 'Use student discounts',
        'body': 'Always ask for student pricing on software, travel, food and subscriptions.',
    },
    {
        'title': 'Cook more, order less',
        'body': 'Food delivery adds up quickly. Cooking with friends is cheaper and more fun.',
    },
    {
        'title': 'Watch small UPI payments',
        'body': 'Quick scans for tea and snacks are easy to forget. Log them the same day.',
    },
    {
        'title': 'Buy used textbooks',
        'body': 'Seniors, libraries and second-hand stores can cut your book costs by half.',
    },
    {
        'title': 'Build an emergency fund',
        'body': 'Aim to keep one month of expenses saved for surprises like repairs or medical bills.',
    },
]

WEEKLY_CHALLENGES: List[Dict[str, object]] = [
    {
        'title': '₹10 Daily Challenge',
        'description': 'Save ₹10 every day for a week',
        'days': 7,
    },
    {
        'title': 'No Impulse Buying',
        'description': 'Think twice before any purchase above ₹100',
        'days': 3,
    },
    {
        'title': 'Track Everything',
        'description': 'Record every expense for 5 days',
        'days': 5,
    },
]


def categories_for(tx_type: str) -> List[str]:
    """Suggested categories for a transaction type (empty for unknown types)."""
    return list(CATEGORY_SUGGESTIONS.get(tx_type, []))
