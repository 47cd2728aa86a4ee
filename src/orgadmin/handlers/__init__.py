"""AppSync Lambda resolvers, one module per mutation."""
