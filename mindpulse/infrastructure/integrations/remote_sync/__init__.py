from mindpulse.infrastructure.integrations.remote_sync.http_remote_sync import HttpRemoteSync

__all__ = ["HttpRemoteSync"]
