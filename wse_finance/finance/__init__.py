"""Pure calculation engine: debt, discounting, IRR, LCOE and the schedule builder."""
