"""
Tabular payroll processing: earnings from a DataFrame in, payslips and run summaries out.
"""
import pandas as pd
from collections import Counter
from typing import Any, Dict, Iterable, List, Optional

from ..core.schemas import DeductionConfig
from .engine import PayrollEngine

def deduction_keys(lines: List[Dict[str, Any]]) -> List[str]:
    """Column/bucket key per payslip line; repeated names get the config id appended."""
    labels = [line['name'] or line['config_id'] for line in lines]
    counts = Counter(labels)
    return [
        f"{label} ({line['config_id']})" if counts[label] > 1 else label
        for label, line in zip(labels, lines)
    ]

class PayrollBulkProcessor:
    """Runs a payroll over spreadsheet-shaped earnings data."""

    def __init__(self, tenant_id: str, deductions: Iterable[DeductionConfig]):
        self.tenant_id = tenant_id
        self.engine = PayrollEngine(tenant_id, deductions)
        self.logger = self.engine.logger

    def snapshots_from_frame(self, df: pd.DataFrame, allowance_columns: Optional[List[str]] = None) -> List[Dict[str, Any]]:
        """
        Build employee records from a frame with ``employee_id``, ``basic_pay``
        and one column per allowance.

        Without explicit ``allowance_columns`` every numeric column other than
        ``basic_pay`` is taken as an allowance.
        """
        df = df.copy()
        if 'employee_id' in df.columns:
            df['employee_id'] = df['employee_id'].astype(str).str.strip().str.upper()
        if 'basic_pay' not in df.columns:
            df['basic_pay'] = 0.0
        df['basic_pay'] = pd.to_numeric(df['basic_pay'], errors='coerce').fillna(0)

        if allowance_columns is None:
            allowance_columns = [
                c for c in df.select_dtypes(include='number').columns
                if c != 'basic_pay'
            ]
        for column in allowance_columns:
            df[column] = pd.to_numeric(df[column], errors='coerce').fillna(0)

        employees = []
        for row in df.to_dict(orient='records'):
            employees.append({
                'id': row.get('employee_id'),
                'name': row.get('name') if isinstance(row.get('name'), str) else '',
                'basic_pay': float(row['basic_pay']),
                'allowances': {column: float(row[column]) for column in allowance_columns},
            })
        return employees

    def process_frame(self, df: pd.DataFrame, payroll_period: str, allowance_columns: Optional[List[str]] = None) -> Dict[str, Any]:
        employees = self.snapshots_from_frame(df, allowance_columns)
        payslips = self.engine.run_payroll(employees)
        summary = self._generate_payroll_summary(payslips, payroll_period)
        self.logger.info("Processed payroll %s: %d employees", payroll_period, summary['total_employees'])
        return summary

    def to_frame(self, payslips: List[Dict[str, Any]]) -> pd.DataFrame:
        """One row per employee, one employee-share column per deduction."""
        rows = []
        for slip in payslips:
            row = {
                'employee_id': slip.get('employee_id'),
                'name': slip.get('name'),
                'gross': slip['gross'],
            }
            for key, line in zip(deduction_keys(slip['deductions']), slip['deductions']):
                row[key] = line['employee']
            row['statutory_deductions'] = slip['statutory_deductions']
            row['employer_contributions'] = slip['employer_contributions']
            row['other_deductions'] = slip['other_deductions_total']
            row['net'] = slip['net']
            rows.append(row)
        return pd.DataFrame(rows)

    def export_payroll(self, payslips: List[Dict[str, Any]], file_path: str) -> bool:
        """Export payslips to CSV."""
        if not payslips:
            return False
        self.to_frame(payslips).to_csv(file_path, index=False)
        return True

    def _generate_payroll_summary(self, payslips: List[Dict[str, Any]], period: str) -> Dict[str, Any]:
        if not payslips:
            return {'period': period, 'total_employees': 0}

        total_employees = len(payslips)
        total_gross = sum(slip['gross'] for slip in payslips)
        total_statutory = sum(slip['statutory_deductions'] for slip in payslips)
        total_employer = sum(slip['employer_contributions'] for slip in payslips)
        total_other = sum(slip['other_deductions_total'] for slip in payslips)
        total_net = sum(slip['net'] for slip in payslips)

        by_deduction: Dict[str, Dict[str, float]] = {}
        for slip in payslips:
            for key, line in zip(deduction_keys(slip['deductions']), slip['deductions']):
                bucket = by_deduction.setdefault(key, {'employee': 0.0, 'employer': 0.0, 'total': 0.0})
                bucket['employee'] += line['employee']
                bucket['employer'] += line['employer']
                bucket['total'] += line['total']

        employee_details = []
        for slip in payslips:
            employee_details.append({
                'employee_id': slip.get('employee_id'),
                'gross': slip['gross'],
                'statutory_deductions': slip['statutory_deductions'],
                'net': slip['net'],
            })

        return {
            'period': period,
            'total_employees': total_employees,
            'totals': {
                'gross': round(total_gross, 2),
                'statutory_deductions': round(total_statutory, 2),
                'employer_contributions': round(total_employer, 2),
                'other_deductions': round(total_other, 2),
                'net': round(total_net, 2),
                'by_deduction': {
                    name: {k: round(v, 2) for k, v in amounts.items()}
                    for name, amounts in by_deduction.items()
                },
            },
            'averages': {
                'gross': round(total_gross / total_employees, 2),
                'net': round(total_net / total_employees, 2),
            },
            'employee_details': employee_details,
        }
