#!/usr/bin/env python3

# Examples of rate of return calculations.
# Written by the nrsolve developers, October 2026.

from datetime import date

from nrsolve.finance import irr, npv, xirr

cash_flows = [-1000.0, 300.0, 400.0, 500.0, 200.0]
r = irr(cash_flows)
print(f"IRR = {100 * r:.4f} %, NPV at IRR = {npv(r, cash_flows):.3E}")

cash_flows = [-10000.0, 2750.0, 4250.0, 3250.0, 2750.0]
dates = [date(2008, 1, 1), date(2008, 3, 1), date(2008, 10, 30),
         date(2009, 2, 15), date(2009, 4, 1)]
print(f"XIRR = {100 * xirr(cash_flows, dates, verbose=True):.4f} %")
