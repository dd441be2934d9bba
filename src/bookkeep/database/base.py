"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date

# Import entities directly so the database layer never pulls in domain services
from bookkeep.domain.entities import (
    Account,
    Bill,
    Budget,
    Category,
    Client,
    Invoice,
    Supplier,
    Transaction,
)


class Database(ABC):
    """Abstract record store for bookkeep.

    The list_* methods form the read interface reports are built from; each
    returns the current contents of one collection as domain entities.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Account operations
    @abstractmethod
    def create_account(self, account: Account) -> str:
        """Store a new account. Returns account ID."""
        pass

    @abstractmethod
    def get_account(self, account_id: str) -> Optional[Account]:
        """Get account by ID."""
        pass

    @abstractmethod
    def list_accounts(self) -> list[Account]:
        """List all accounts."""
        pass

    # Category operations
    @abstractmethod
    def create_category(self, category: Category) -> str:
        """Store a new category. Returns category ID."""
        pass

    @abstractmethod
    def get_category(self, category_id: str) -> Optional[Category]:
        """Get category by ID."""
        pass

    @abstractmethod
    def list_categories(self) -> list[Category]:
        """List all categories."""
        pass

    # Client and supplier operations
    @abstractmethod
    def create_client(self, client: Client) -> str:
        """Store a new client. Returns client ID."""
        pass

    @abstractmethod
    def list_clients(self) -> list[Client]:
        """List all clients."""
        pass

    @abstractmethod
    def create_supplier(self, supplier: Supplier) -> str:
        """Store a new supplier. Returns supplier ID."""
        pass

    @abstractmethod
    def list_suppliers(self) -> list[Supplier]:
        """List all suppliers."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(self, transaction: Transaction) -> str:
        """Store a new transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        category_id: Optional[str] = None,
    ) -> list[Transaction]:
        """List transactions with optional filters.

        Args:
            start_date: Optional start date filter
            end_date: Optional end date filter
            category_id: Optional category ID filter
        """
        pass

    # Invoice and bill operations
    @abstractmethod
    def create_invoice(self, invoice: Invoice) -> str:
        """Store a new invoice with its items. Returns invoice ID."""
        pass

    @abstractmethod
    def list_invoices(self) -> list[Invoice]:
        """List all invoices."""
        pass

    @abstractmethod
    def create_bill(self, bill: Bill) -> str:
        """Store a new bill with its items. Returns bill ID."""
        pass

    @abstractmethod
    def list_bills(self) -> list[Bill]:
        """List all bills."""
        pass

    # Budget operations
    @abstractmethod
    def create_budget(self, budget: Budget) -> str:
        """Store a new budget with its category lines. Returns budget ID."""
        pass

    @abstractmethod
    def list_budgets(self) -> list[Budget]:
        """List all budgets."""
        pass
