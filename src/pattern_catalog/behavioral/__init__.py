"""
Behavioral patterns: how objects communicate and share responsibility.

Modules:
- chain_of_responsibility: Log messages routed through a handler chain
- command: Remote control buttons bound to command objects
- null_object: Customers without an address that silently do nothing
- observer: Stock ticker pushing prices to subscribers
- state: Coin-operated vending machine
- strategy: Interchangeable payment methods
- template_method: Fixed beverage recipe with pluggable steps
- visitor: Area and description operations over shapes
"""
