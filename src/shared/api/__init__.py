"""HTTP plumbing shared by the context routers."""
