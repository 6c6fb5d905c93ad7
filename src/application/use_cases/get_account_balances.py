"""Use case to compute account balances for the portfolio view."""

from collections.abc import Sequence

from src.domain.models import Account, AccountBalances, AccountBalanceView, Asset
from src.domain.services import CurrencyConverter, account_balance
from src.infrastructure.logging.logger import get_app_logger


class GetAccountBalancesUseCase:
    """Compute account balances in the display currency."""

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
        accounts: Sequence[Account],
        assets: Sequence[Asset],
    ) -> AccountBalances:
        """Return converted account balances sorted by name.

        Investment accounts are valued from their linked assets; each amount
        is converted exactly once before the portfolio total is summed.

        Args:
            accounts: Bank and investment accounts.
            assets: Holdings linked to investment accounts.

        Returns:
            AccountBalances: Per-account balances and their total.
        """
        currency = self._converter.display_currency
        known_ids = {account.id for account in accounts}
        orphans = [asset for asset in assets if asset.account_id not in known_ids]
        if orphans:
            self._logger.warning(
                f"Ignoring {len(orphans)} assets linked to unknown accounts"
            )

        views = [
            AccountBalanceView(
                account_id=account.id,
                name=account.name,
                account_type=account.type.value,
                balance=account_balance(account, assets, self._converter),
                currency_code=currency,
                institution=account.institution,
            )
            for account in accounts
        ]
        views = sorted(views, key=lambda item: (item.name.lower(), item.account_id))
        total = sum((view.balance for view in views), 0.0)
        self._logger.info(
            f"Fetched {len(views)} account balances for {currency.value}"
        )
        return AccountBalances(
            currency_code=currency,
            total=total,
            accounts=views,
        )


__all__ = ["GetAccountBalancesUseCase", "AccountBalances", "AccountBalanceView"]
