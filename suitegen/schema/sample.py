"""Built-in sample result for demo mode."""

from .models import GenerationResult

SAMPLE_IDENTIFIER = "acme/payment-service"

SAMPLE_PRIORITIES = (
    "Focus on payment processing module, API endpoint security, "
    "and Stripe integration error handling"
)

_SAMPLE_PAYLOAD = {
    "repository_info": {
        "name": SAMPLE_IDENTIFIER,
        "languages": "TypeScript, JavaScript",
        "structure_summary": (
            "A Node.js payment processing service with Express.js API, Stripe "
            "integration, webhook handlers, and PostgreSQL database layer. "
            "Key modules: auth, payments, webhooks, db."
        ),
    },
    "unit_tests": {
        "title": "Unit Tests - Payment Service",
        "test_count": "12",
        "code": """import { describe, it, expect } from '@jest/globals'
import { PaymentProcessor } from '../src/payments/processor'
import { validateCard } from '../src/payments/validation'

describe('PaymentProcessor', () => {
  it('should process a valid payment', async () => {
    const processor = new PaymentProcessor()
    const result = await processor.charge({ amount: 1000, currency: 'usd', source: 'tok_visa' })
    expect(result.status).toBe('succeeded')
  })

  it('should reject negative amounts', async () => {
    const processor = new PaymentProcessor()
    await expect(
      processor.charge({ amount: -100, currency: 'usd', source: 'tok_visa' })
    ).rejects.toThrow('Invalid amount')
  })
})

describe('validateCard', () => {
  it('should reject an invalid card number', () => {
    expect(validateCard('1234567890123456')).toBe(false)
  })
})""",
        "summary": (
            "Covers payment processing, validation, and currency conversion "
            "with 12 test cases across 2 describe blocks."
        ),
    },
    "integration_tests": {
        "title": "Integration Tests - API Endpoints",
        "test_count": "8",
        "code": """import request from 'supertest'
import { app } from '../src/app'

describe('POST /api/payments', () => {
  it('should return 401 without auth', async () => {
    const res = await request(app)
      .post('/api/payments')
      .send({ amount: 2000, currency: 'usd' })
    expect(res.status).toBe(401)
  })
})""",
        "summary": (
            "Tests API endpoints with database integration, authentication "
            "flows, and error responses."
        ),
    },
    "e2e_tests": {
        "title": "E2E Tests - Payment Flow",
        "test_count": "5",
        "code": """import { test, expect } from '@playwright/test'

test('handles declined card', async ({ page }) => {
  await page.goto('/checkout')
  await page.fill('#card-number', '4000000000000002')
  await page.click('#pay-button')
  await expect(page.locator('.error-message')).toContainText('declined')
})""",
        "summary": (
            "End-to-end tests covering the complete payment flow from "
            "checkout to confirmation."
        ),
    },
    "edge_case_tests": {
        "title": "Edge Case Tests - Boundary Conditions",
        "test_count": "7",
        "code": """describe('Edge Cases', () => {
  it('should handle zero amount', async () => {
    await expect(processor.charge({ amount: 0 }))
      .rejects.toThrow('Amount must be positive')
  })
})""",
        "summary": (
            "Tests boundary conditions, concurrency, XSS prevention, and "
            "extreme input values."
        ),
    },
    "performance_tests": {
        "title": "Performance Tests - Load & Latency",
        "test_count": "4",
        "code": """describe('Performance', () => {
  it('should process payment under 500ms', async () => {
    const start = performance.now()
    await processor.charge({ amount: 1000, currency: 'usd' })
    expect(performance.now() - start).toBeLessThan(500)
  })
})""",
        "summary": "Validates response times and throughput under load conditions.",
    },
    "overall_summary": (
        "Generated 36 test cases across 5 categories for the "
        "acme/payment-service repository, covering unit logic, API "
        "integration, end-to-end flows, edge cases, and performance."
    ),
}


def sample_result() -> GenerationResult:
    """Return a fresh copy of the sample result."""
    return GenerationResult.model_validate(_SAMPLE_PAYLOAD)
