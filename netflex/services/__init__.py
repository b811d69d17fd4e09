"""
High-level use cases for the Netflex mock backend.

Each service module orchestrates repositories to implement one slice of the
contract (catalog CRUD, login/session, uploads, assistant). Every async call
answers with an ApiResponse envelope; expected failures are data, not
exceptions.
"""
