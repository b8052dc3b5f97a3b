"""
scoring/ - IEOP Scoring Engine

Modules:
    utils.py                   - Decimal utilities (round half-up, clamp, day spans)
    reference_costs.py         - Reference cost per m² by work type
    cost_calculator.py         - Cost component (30%)
    schedule_calculator.py     - Schedule component (30%)
    recurrence_calculator.py   - Recurrence component (15%)
    execution_calculator.py    - Execution component (25%)
    ieop_calculator.py         - IEOP composite + classification
    portfolio_aggregator.py    - Portfolio scoring and statistics
"""
