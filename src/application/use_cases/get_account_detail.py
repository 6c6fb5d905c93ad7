"""Use case to compute the detail panel of one account."""

from collections.abc import Sequence

from src.domain.models import (
    Account,
    AccountDetail,
    AccountType,
    Asset,
    Transaction,
)
from src.domain.services import (
    CurrencyConverter,
    account_balance,
    account_cashflow,
    top_performer,
)
from src.infrastructure.logging.logger import get_app_logger


class GetAccountDetailUseCase:
    """Compute cashflow or holdings analytics for a single account."""

    def __init__(
        self,
        converter: CurrencyConverter,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            converter: Session converter targeting the display currency.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._converter = converter
        self._logger = logger or get_app_logger()

    def execute(
        self,
        account: Account,
        assets: Sequence[Asset] = (),
        transactions: Sequence[Transaction] = (),
    ) -> AccountDetail:
        """Return the account detail in the display currency.

        Bank accounts report converted income and expense of the transactions
        booked on them. Investment accounts report their linked holdings and
        the holding with the best daily change.

        Args:
            account: Account to describe.
            assets: Holdings of any account.
            transactions: Transactions of any account.

        Returns:
            AccountDetail: Balance plus cashflow or holdings analytics.
        """
        converter = self._converter
        balance = account_balance(account, assets, converter)
        if account.type == AccountType.BANK:
            income, expense = account_cashflow(account.id, transactions, converter)
            self._logger.info(
                f"Account {account.id} cashflow: income={income}, "
                f"expense={expense}"
            )
            return AccountDetail(
                account_id=account.id,
                name=account.name,
                account_type=account.type.value,
                balance=balance,
                currency_code=converter.display_currency,
                income=income,
                expense=expense,
            )

        holdings = [asset for asset in assets if asset.account_id == account.id]
        best = top_performer(holdings)
        self._logger.info(
            f"Account {account.id} holdings: {len(holdings)} assets, "
            f"top={best.name if best else None}"
        )
        return AccountDetail(
            account_id=account.id,
            name=account.name,
            account_type=account.type.value,
            balance=balance,
            currency_code=converter.display_currency,
            holdings=holdings,
            top_performer=best,
        )


__all__ = ["GetAccountDetailUseCase", "AccountDetail"]
