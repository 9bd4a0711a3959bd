"""도감 Service 계층 - Core 조합 + EventBus 발행"""
