"""Top-level package for MoneyMentor, a student finance tracker.

The primary modules are:

* ``budget_engine`` – derives the budget summary and status from transactions
* ``storage`` – key-value persistence for transactions and the summary
* ``session`` – state reducer and the persisting session object
* ``app`` – the Streamlit page that ties everything together

To run the app from the command line you can execute:

```bash
streamlit run moneymentor/Home.py
```
"""

from . import budget_engine  # noqa: F401  # re-exported for convenience
from . import session  # noqa: F401  # re-exported for convenience
from . import storage  # noqa: F401  # re-exported for convenience
from .budget_engine import classify_status, derive_summary, spent_percentage
from .models import BudgetStatus, BudgetSummary, Transaction
from .session import BudgetSession, BudgetState, add_transaction, apply_transaction

__all__ = [
    "budget_engine",
    "session",
    "storage",
    "classify_status",
    "derive_summary",
    "spent_percentage",
    "BudgetStatus",
    "BudgetSummary",
    "Transaction",
    "BudgetSession",
    "BudgetState",
    "add_transaction",
    "apply_transaction",
]
__version__ = "0.1.0"
