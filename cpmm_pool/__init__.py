"""
cpmm_pool: single two-asset constant-product pool with an operator-managed
liquidity supply.
"""
