# stake_accounts/errors.py


class StakeAccountsError(Exception):
    pass
